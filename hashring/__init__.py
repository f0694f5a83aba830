"""Consistent hash ring with virtual nodes; see the ``ring`` module."""

__version__ = "0.1.0"
__all__ = ["ring"]