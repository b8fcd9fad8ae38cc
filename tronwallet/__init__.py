"""Helpers for TRON wallet data: hex, 256-bit words, contract strings and protobuf JSON."""

__version__ = "0.1.0"
__all__ = ["__version__"]