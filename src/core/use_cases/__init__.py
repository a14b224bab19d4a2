"""Use case layer for business logic (Clean Architecture)."""

from .relay_comment import RelayCommentUseCase

__all__ = ["RelayCommentUseCase"]
