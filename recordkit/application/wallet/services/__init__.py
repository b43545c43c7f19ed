from .wallet_service import WalletService

__all__ = ["WalletService"]
