"""Command-line and terminal front end."""
