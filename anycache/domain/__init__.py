"""Domain layer: cache contracts, value objects and errors."""
