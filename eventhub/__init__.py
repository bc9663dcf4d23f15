"""EventHub: events and the tickets issued for them."""

__version__ = "1.0.0"
