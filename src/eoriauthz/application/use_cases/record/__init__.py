"""Record-level access use cases."""
