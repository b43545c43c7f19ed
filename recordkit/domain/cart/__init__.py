"""Shopping cart bounded context: products with price, quantity and tax."""
