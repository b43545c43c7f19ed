from .bookstore_service import BookstoreService, PurchaseReceipt

__all__ = ["BookstoreService", "PurchaseReceipt"]
