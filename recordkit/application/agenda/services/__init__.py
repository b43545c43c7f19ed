from .agenda_service import AgendaService

__all__ = ["AgendaService"]
