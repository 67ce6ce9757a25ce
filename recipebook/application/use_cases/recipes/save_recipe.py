# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Create and update recipes on behalf of an authenticated chef."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from recipebook.domain.chefs.entities import ChefIdentity
from recipebook.domain.recipes.entities import Recipe, RecipeIngredient
from recipebook.domain.recipes.repositories import RecipeRepository
from recipebook.shared.errors import RecipeNotFoundError


@dataclass(slots=True, frozen=True)
class RecipeDraft:
    name: str
    instructions: str = ""
    ingredients: Sequence[RecipeIngredient] = field(default_factory=tuple)


class CreateRecipeUseCase:
    def __init__(self, *, recipes: RecipeRepository) -> None:
        self._recipes = recipes

    def execute(self, chef: ChefIdentity, draft: RecipeDraft) -> Recipe:
        recipe = Recipe(
            id=0,
            name=draft.name,
            instructions=draft.instructions,
            ingredients=tuple(draft.ingredients),
            author_id=chef.id,
        )
        return self._recipes.save(recipe)


class UpdateRecipeUseCase:
    def __init__(self, *, recipes: RecipeRepository) -> None:
        self._recipes = recipes

    def execute(self, chef: ChefIdentity, recipe_id: int, draft: RecipeDraft) -> Recipe:
        existing = self._recipes.find_by_id(recipe_id)
        if existing is None:
            raise RecipeNotFoundError(recipe_id)
        replacement = Recipe(
            id=existing.id,
            name=draft.name,
            instructions=draft.instructions,
            ingredients=tuple(draft.ingredients),
            author_id=existing.author_id,
        )
        return self._recipes.save(replacement)
