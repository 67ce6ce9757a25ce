# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Page value object shared by recipe and ingredient queries."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from .exceptions import InvariantViolation

T = TypeVar("T")
U = TypeVar("U")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> SortDirection:
        """Anything other than a case-insensitive ``desc`` sorts ascending."""

        if value and value.strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


def count_pages(total_items: int, page_size: int) -> int:
    return math.ceil(total_items / page_size) if total_items > 0 else 0


def page_offset(page_number: int, page_size: int) -> int:
    return (page_number - 1) * page_size


@dataclass(slots=True, frozen=True)
class Page(Generic[T]):
    """One slice of an ordered result.

    Page numbers start at 1. A page number past ``total_pages`` is valid and
    carries no items, so callers can tell "ran off the end" from "bad input".
    """

    page_number: int
    page_size: int
    total_pages: int
    total_items: int
    items: Sequence[T] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise InvariantViolation("page number must be >= 1", field="page_number")
        if self.page_size < 1:
            raise InvariantViolation("page size must be >= 1", field="page_size")
        if len(self.items) > self.page_size:
            raise InvariantViolation("page holds more items than its size", field="items")
        if self.total_pages != count_pages(self.total_items, self.page_size):
            raise InvariantViolation("total pages does not match total items", field="total_pages")
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def from_slice(
        cls, items: Sequence[T], *, page_number: int, page_size: int, total_items: int
    ) -> Page[T]:
        return cls(
            page_number=page_number,
            page_size=page_size,
            total_pages=count_pages(total_items, page_size),
            total_items=total_items,
            items=items,
        )

    @classmethod
    def paginate(cls, items: Sequence[T], *, page_number: int, page_size: int) -> Page[T]:
        """Slice an already ordered, in-memory sequence."""

        offset = page_offset(page_number, page_size)
        return cls.from_slice(
            items[offset : offset + page_size],
            page_number=page_number,
            page_size=page_size,
            total_items=len(items),
        )

    def map(self, fn: Callable[[T], U]) -> Page[U]:
        return Page(
            page_number=self.page_number,
            page_size=self.page_size,
            total_pages=self.total_pages,
            total_items=self.total_items,
            items=tuple(fn(item) for item in self.items),
        )

    def to_dict(self, item_serializer: Callable[[T], Any]) -> dict[str, Any]:
        return {
            "page_number": self.page_number,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
            "total_items": self.total_items,
            "items": [item_serializer(item) for item in self.items],
        }


__all__ = ["Page", "SortDirection", "count_pages", "page_offset"]
