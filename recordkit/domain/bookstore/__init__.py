"""Bookstore bounded context: books with authors, prices and stock."""
