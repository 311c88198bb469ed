"""Command-line interface for dltmode."""
