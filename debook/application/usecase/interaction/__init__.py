"""Interaction use cases."""

from .comment_on_post import CommentOnPostRequest, CommentOnPostUseCase
from .get_post_interactions import (
    GetPostInteractionsRequest,
    GetPostInteractionsUseCase,
)
from .like_post import LikePostRequest, LikePostUseCase
from .response import InteractionResponse
from .unlike_post import UnlikePostRequest, UnlikePostUseCase

__all__ = [
    "CommentOnPostRequest",
    "CommentOnPostUseCase",
    "GetPostInteractionsRequest",
    "GetPostInteractionsUseCase",
    "InteractionResponse",
    "LikePostRequest",
    "LikePostUseCase",
    "UnlikePostRequest",
    "UnlikePostUseCase",
]
