"""Asynchronous building blocks for MIPI Display Command Set displays."""

__version__ = "0.9.0"