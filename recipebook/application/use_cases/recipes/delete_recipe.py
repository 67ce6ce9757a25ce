# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from recipebook.domain.chefs.entities import ChefIdentity
from recipebook.domain.recipes.repositories import RecipeRepository
from recipebook.shared.errors import RecipeNotFoundError


class DeleteRecipeUseCase:
    def __init__(self, *, recipes: RecipeRepository) -> None:
        self._recipes = recipes

    def execute(self, chef: ChefIdentity, recipe_id: int) -> None:
        if not self._recipes.delete(recipe_id):
            raise RecipeNotFoundError(recipe_id)
