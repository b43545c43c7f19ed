"""Feed bounded context: users who follow each other and publish tweets."""
