"""User-role binding use cases."""
