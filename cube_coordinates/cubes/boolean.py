"""Order-preserving set algebra over coordinate collections.

Every operation de-duplicates its result and keeps first-seen order: elements
of ``a`` come first, then elements found only in ``b``. Elements only need to
be hashable, so the functions work on cubes, axial pairs or plain tuples.
"""

from __future__ import annotations

from typing import Hashable, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)


def dedup(items: Iterable[T]) -> list[T]:
    return list(dict.fromkeys(items))


def combine(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Union of ``a`` and ``b``."""

    merged = dict.fromkeys(a)
    merged.update(dict.fromkeys(b))
    return list(merged)


def difference(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Elements of ``a`` that are not in ``b``."""

    excluded = set(b)
    return [item for item in dedup(a) if item not in excluded]


def intersect(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Elements present in both ``a`` and ``b``, in ``a`` order."""

    shared = set(b)
    return [item for item in dedup(a) if item in shared]


def symmetric_difference(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Elements present in exactly one of ``a`` and ``b``."""

    left = list(a)
    right = list(b)
    return difference(combine(left, right), intersect(left, right))


__all__ = ["combine", "dedup", "difference", "intersect", "symmetric_difference"]
