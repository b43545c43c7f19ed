from .phone_service import PhoneService

__all__ = ["PhoneService"]
