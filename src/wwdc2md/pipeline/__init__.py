"""Output pipeline for rendered Markdown."""

from .steps import SaveStep

__all__ = [
    "SaveStep",
]
