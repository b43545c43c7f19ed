"""
Domain layer.

The domain layer contains entities, value objects and their validation
rules. It has no dependencies on logging or configuration.

Bounded contexts:
- agenda: tasks with categories and due dates
- cart: products with prices, quantities and tax
- bookstore: books with authors, stock and prices
- feed: users, follows and tweets
- chat: users and dated messages
- wallet: dated income and expense operations
- notebook: titled list of notes
- phone: contacts, calls and messages
- devices: car, television and calculator state machines
"""
