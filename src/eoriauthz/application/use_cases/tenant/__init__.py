"""Parish membership use cases."""
