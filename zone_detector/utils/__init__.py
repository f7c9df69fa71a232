"""Utility helpers for price math."""

from . import prices as prices

__all__ = ["prices"]
