"""Session lifecycle use cases."""
