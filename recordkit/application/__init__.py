"""
Application layer.

One service per bounded context, each built on CollectionService. Services
log successful mutations through structlog and let domain errors propagate.
"""
