"""Proxy for Ola Maps place search and nearby place aggregation."""

__version__ = "1.0.0"
