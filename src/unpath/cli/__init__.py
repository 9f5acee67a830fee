"""Command-line tool support."""
