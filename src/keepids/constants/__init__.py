"""Compiled-in constants for keep-ids."""
