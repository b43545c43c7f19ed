"""Bookstore application services."""
