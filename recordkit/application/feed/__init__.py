"""Feed application services."""
