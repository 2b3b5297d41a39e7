"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase
from .remove_comment import RemoveCommentRequest, RemoveCommentUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "RemoveCommentRequest",
    "RemoveCommentUseCase",
]
