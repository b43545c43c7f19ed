"""Agenda application services."""
