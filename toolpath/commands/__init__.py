"""Command handlers for the toolpath CLI."""
