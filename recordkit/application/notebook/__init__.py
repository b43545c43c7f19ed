"""Notebook application services."""
