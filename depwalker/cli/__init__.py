"""Command implementations for the depwalker CLI."""
