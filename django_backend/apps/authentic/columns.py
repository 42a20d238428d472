from typing import FrozenSet, Iterable, Optional, Type

from django.db import models


def get_column_names(model: Type[models.Model]) -> FrozenSet[str]:
    """Return the database column names of every concrete field on ``model``."""
    return frozenset(field.column for field in model._meta.concrete_fields)


def first_column_to_exist(
    column_names: Iterable[str],
    *candidates: Optional[str]
) -> Optional[str]:
    """
    Return the first candidate present in ``column_names``.

    Falls back to the first candidate when none is present, which may itself
    be ``None``. Returns ``None`` when no candidates are given.
    """
    available = set(column_names)
    for candidate in candidates:
        if candidate is not None and candidate in available:
            return candidate
    return candidates[0] if candidates else None
