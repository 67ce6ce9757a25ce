# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from recipebook.domain.pagination import Page

from .entities import Ingredient


class IngredientRepository(Protocol):
    def find_by_id(self, ingredient_id: int) -> Ingredient | None: ...
    def find_by_name(self, name: str) -> Ingredient | None: ...
    def list_all(self) -> Sequence[Ingredient]: ...
    def search(self, term: str) -> Sequence[Ingredient]: ...
    def list_page(self, page_number: int, page_size: int) -> Page[Ingredient]: ...
    def search_page(self, term: str, page_number: int, page_size: int) -> Page[Ingredient]: ...
    def save(self, ingredient: Ingredient) -> Ingredient: ...
    def delete(self, ingredient_id: int) -> bool: ...
