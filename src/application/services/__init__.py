"""Application services - stateful coordination around use cases."""

from .quick_find import QuickFindResponse, QuickFindSession

__all__ = [
    "QuickFindResponse",
    "QuickFindSession",
]
