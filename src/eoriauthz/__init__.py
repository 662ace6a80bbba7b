"""EORI authorization service - permission resolution for parish administration."""

__version__ = "0.1.0"
