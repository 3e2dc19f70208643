"""Command-line interface: configuration, console prompts and the typer app."""
