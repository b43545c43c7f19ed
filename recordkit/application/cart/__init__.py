"""Shopping cart application services."""
