"""CLI commands for dltmode."""
