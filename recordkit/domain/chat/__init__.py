"""Chat bounded context: users exchanging dated messages."""
