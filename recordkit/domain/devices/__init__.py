"""Devices bounded context: single-object state machines with no collection."""
