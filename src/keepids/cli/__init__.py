"""Command-line interface for keep-ids."""
