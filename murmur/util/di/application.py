"""Use case providers.

Use cases declare their services in ``__init__``, so dishka builds them
straight from the class.
"""

from dishka import Scope, provide_all

from murmur.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    LikeCommentUseCase,
    ListCommentsUseCase,
    UnlikeCommentUseCase,
    UpdateCommentUseCase,
)
from murmur.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    scope = Scope.REQUEST

    comment_use_cases = provide_all(
        CreateCommentUseCase,
        ListCommentsUseCase,
        GetCommentUseCase,
        UpdateCommentUseCase,
        DeleteCommentUseCase,
        LikeCommentUseCase,
        UnlikeCommentUseCase,
    )
