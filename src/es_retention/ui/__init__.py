"""User-facing command-line interface."""
