"""Packaged seed payloads."""
