"""Utility functions for logic_algebra."""

from .bits import bits_of, to_signed, to_unsigned, wrap

__all__ = ["bits_of", "to_signed", "to_unsigned", "wrap"]
