"""Command-line interface for hashfiles."""
