"""Authorization decision adapters."""
