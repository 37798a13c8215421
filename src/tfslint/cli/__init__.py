"""Command-line interface for tfslint."""
