"""Command-line interface for goplay."""
