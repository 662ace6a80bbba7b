"""Role management use cases."""
