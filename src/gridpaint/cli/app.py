"""Typer CLI application."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from gridpaint.config import EditorConfig
from gridpaint.core.canvas import Canvas
from gridpaint.core.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from gridpaint.core.errors import GridPaintError
from gridpaint.logging_utils import setup_logging


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="gridpaint",
        help="Paint character art in the terminal with the mouse.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def read_canvas(path: Path) -> Canvas:
        import gridpaint as gp

        try:
            return gp.load(path)
        except (OSError, GridPaintError) as e:
            err_console.print(f"[red]Cannot read {path}: {e}[/]")
            raise typer.Exit(1)

    @app.command()
    def edit(
        path: Annotated[Optional[Path], typer.Argument(help="Canvas file to open")] = None,
        width: Annotated[Optional[int], typer.Option("--width", "-w", min=1, help="Canvas width")] = None,
        height: Annotated[Optional[int], typer.Option("--height", "-H", min=1, help="Canvas height")] = None,
        brush: Annotated[Optional[str], typer.Option("--brush", "-b", help="Initial brush character")] = None,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Where to write the log")] = None,
        debug: Annotated[bool, typer.Option("--debug", help="Log every event")] = False,
    ) -> None:
        """Open the interactive editor."""
        from gridpaint.cli.studio.editor import run_editor

        try:
            config = EditorConfig.from_env().override(
                width=width,
                height=height,
                brush=brush,
                log_path=log_file,
                log_level="DEBUG" if debug else None,
            )
        except GridPaintError as e:
            err_console.print(f"[red]{e}[/]")
            raise typer.Exit(2)

        log_path = setup_logging(config.log_path, config.level)
        console.print(f"[dim]Logging to {log_path}[/]")
        run_editor(config, path)

    @app.command()
    def view(
        path: Annotated[Path, typer.Argument(help="Canvas file to print")],
    ) -> None:
        """Print a canvas file without its header."""
        from gridpaint.render.text import TextRenderer

        canvas = read_canvas(path)
        typer.echo(TextRenderer().render(canvas), nl=False)

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="Canvas file to inspect")],
    ) -> None:
        """Show the size of a canvas file and how much of it is painted."""
        canvas = read_canvas(path)
        console.print(f"[bold cyan]{path.name}[/]")
        console.print(f"  [bold]Size:[/]    {canvas.width}x{canvas.height}")
        console.print(f"  [bold]Painted:[/] {canvas.painted()} cells")

    @app.command()
    def new(
        path: Annotated[Path, typer.Argument(help="Canvas file to create")],
        width: Annotated[int, typer.Option("--width", "-w", min=1, help="Canvas width")] = DEFAULT_WIDTH,
        height: Annotated[int, typer.Option("--height", "-H", min=1, help="Canvas height")] = DEFAULT_HEIGHT,
        force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite an existing file")] = False,
    ) -> None:
        """Write a blank canvas file."""
        import gridpaint as gp

        if path.exists() and not force:
            err_console.print(f"[red]{path} already exists (use --force)[/]")
            raise typer.Exit(1)

        gp.save(Canvas.create(width, height), path)
        console.print(f"[green]Created {width}x{height} canvas → {path}[/]")

    return app
