"""
Exceptions raised by the quantizer.

All of them derive from ValueError so callers that only guard against bad
arguments keep working.
"""
from __future__ import annotations


class QuantizationError(ValueError):
    """Base class for every rejected quantization request."""


class InvalidParameterError(QuantizationError):
    """A numeric parameter or colour value is out of range."""


class EmptyInputError(QuantizationError):
    """No samples to build a palette (or an average) from."""


class EmptyPaletteError(QuantizationError):
    """Nearest-colour lookup against a palette with no entries."""


__all__ = [
    "QuantizationError",
    "InvalidParameterError",
    "EmptyInputError",
    "EmptyPaletteError",
]
