"""Command-line interface for fouroneone."""
