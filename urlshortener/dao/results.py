"""Explicit outcomes of store-facing DAO calls.

Every `UrlRecordBaseDAO` method returns either its success value or a
`StoreError`. Callers branch on `StoreError.kind` instead of catching
backend-specific exceptions.

Kinds:
    NOT_FOUND:
        The requested slug doesn't exist (plain reads).
    CONFLICT:
        A conditional create found the slug already present.
    CONDITION_FAILED:
        An existence-gated update/delete found the slug absent.
    STORE_ERROR:
        Any other backend failure (connectivity, throttling, permissions, ...).

Example:
    >>> result = dao.delete('ab12')
    >>> if isinstance(result, StoreError) and result.kind is StoreErrorKind.CONDITION_FAILED:
    ...     print('nothing to delete')
"""

from dataclasses import dataclass
from enum import StrEnum


class StoreErrorKind(StrEnum):
    NOT_FOUND = 'NOT_FOUND'
    CONFLICT = 'CONFLICT'
    CONDITION_FAILED = 'CONDITION_FAILED'
    STORE_ERROR = 'STORE_ERROR'


@dataclass(frozen=True)
class StoreError:
    kind: StoreErrorKind
    message: str
    cause: BaseException | None = None

    @classmethod
    def not_found(cls, slug: str) -> 'StoreError':
        return cls(StoreErrorKind.NOT_FOUND, f"URL record with slug '{slug}' not found.")

    @classmethod
    def conflict(cls, slug: str) -> 'StoreError':
        return cls(StoreErrorKind.CONFLICT, f"URL record with slug '{slug}' already exists.")

    @classmethod
    def condition_failed(cls, slug: str) -> 'StoreError':
        return cls(StoreErrorKind.CONDITION_FAILED, f"URL record with slug '{slug}' doesn't exist.")

    def is_kind(self, kind: StoreErrorKind) -> bool:
        return self.kind is kind


def is_error(result: object, kind: StoreErrorKind | None = None) -> bool:
    """Return True if `result` is a StoreError (optionally of the given kind)."""
    if not isinstance(result, StoreError):
        return False
    return kind is None or result.is_kind(kind)
