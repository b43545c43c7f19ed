"""Wallet bounded context: dated income and expense operations."""
