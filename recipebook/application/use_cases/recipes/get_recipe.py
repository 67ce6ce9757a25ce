# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from recipebook.domain.recipes.entities import Recipe
from recipebook.domain.recipes.repositories import RecipeRepository
from recipebook.shared.errors import RecipeNotFoundError


class GetRecipeUseCase:
    def __init__(self, *, recipes: RecipeRepository) -> None:
        self._recipes = recipes

    def execute(self, recipe_id: int) -> Recipe:
        recipe = self._recipes.find_by_id(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe
