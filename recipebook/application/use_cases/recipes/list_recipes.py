# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence

from recipebook.domain.pagination import Page
from recipebook.domain.recipes.entities import Recipe
from recipebook.domain.recipes.repositories import RecipeRepository
from recipebook.shared.logging import logger

from .query_resolver import execute_recipe_query, resolve_recipe_query


class ListRecipesUseCase:
    def __init__(self, *, recipes: RecipeRepository, max_page_size: int | None = None) -> None:
        self._recipes = recipes
        self._max_page_size = max_page_size

    def execute(self, params: Mapping[str, str]) -> Sequence[Recipe] | Page[Recipe]:
        query = resolve_recipe_query(params, max_page_size=self._max_page_size)
        logger.debug(f"recipes.list: resolved {query!r}")
        return execute_recipe_query(query, self._recipes)
