from .cart_service import CartService

__all__ = ["CartService"]
