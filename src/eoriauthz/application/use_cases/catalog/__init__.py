"""Permission catalog use cases."""
