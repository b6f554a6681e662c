"""Command implementations behind the pfm CLI."""
