"""Like use cases."""

from .add_like import AddLikeRequest, AddLikeUseCase
from .remove_like import RemoveLikeRequest, RemoveLikeUseCase

__all__ = [
    "AddLikeRequest",
    "AddLikeUseCase",
    "RemoveLikeRequest",
    "RemoveLikeUseCase",
]
