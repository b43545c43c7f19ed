"""Wallet application services."""
