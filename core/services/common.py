from __future__ import annotations

from typing import TypeVar

from django.db.models import Model, QuerySet

from ..exceptions import NotFoundError

ModelT = TypeVar("ModelT", bound=Model)


def fetch_or_404(queryset: QuerySet[ModelT], message: str, **lookup) -> ModelT:
    """Return the single row matching ``lookup`` or raise a 404 with ``message``."""
    instance = queryset.filter(**lookup).first()
    if instance is None:
        raise NotFoundError(message)
    return instance
