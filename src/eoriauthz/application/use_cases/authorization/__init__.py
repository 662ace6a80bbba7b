"""Authorization decision use cases."""
