# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from recipebook.domain.pagination import Page, SortDirection

from .entities import Recipe


class RecipeRepository(Protocol):
    def find_by_id(self, recipe_id: int) -> Recipe | None: ...
    def list_all(self) -> Sequence[Recipe]: ...
    def search_by_name(self, term: str) -> Sequence[Recipe]: ...
    def search_by_ingredient(self, term: str) -> Sequence[Recipe]: ...

    def search_paged(
        self,
        term: str | None,
        page_number: int,
        page_size: int,
        sort_by: str = "id",
        sort_direction: SortDirection = SortDirection.ASC,
    ) -> Page[Recipe]: ...

    def save(self, recipe: Recipe) -> Recipe: ...
    def delete(self, recipe_id: int) -> bool: ...
