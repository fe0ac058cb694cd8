"""Pipeline steps."""

from .save import SaveStep

__all__ = [
    "SaveStep",
]
