"""
Command-line Interface Layer.

This package defines the Typer application and the Rich console output used
by its commands.
"""
