"""Shared utilities: exceptions, identifier generation and formatting."""
