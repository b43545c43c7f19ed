"""Phone bounded context: contacts, favourites, calls and messages."""
