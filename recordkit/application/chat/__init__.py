"""Chat application services."""
