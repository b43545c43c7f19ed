"""
recordkit: validated in-memory collections.

Entities validate and normalize their fields at construction; services
own an ordered collection of one entity type, issue its ids and expose
CRUD, filter and aggregate operations over it.
"""

from recordkit.config import Settings, configure_logging, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
