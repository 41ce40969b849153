"""Command-line interface for fijos."""
