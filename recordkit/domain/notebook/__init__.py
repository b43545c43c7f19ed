"""Notebook bounded context: a titled list of notes."""
