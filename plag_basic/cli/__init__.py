"""Command-line frontend for plag-basic."""
