"""Command-line interface and interactive menu."""
