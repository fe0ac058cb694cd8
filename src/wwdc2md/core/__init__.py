"""Conversion entry points."""

from .converter import ConversionResult, Converter, convert_blocking

__all__ = [
    "ConversionResult",
    "Converter",
    "convert_blocking",
]
