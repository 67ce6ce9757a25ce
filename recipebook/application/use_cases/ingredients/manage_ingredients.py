# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Ingredient catalogue use cases."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from recipebook.application.use_cases.recipes.query_resolver import (
    PAGE_PARAM,
    PAGE_SIZE_PARAM,
    TERM_PARAM,
    parse_positive_int,
)
from recipebook.domain.chefs.entities import ChefIdentity
from recipebook.domain.ingredients.entities import Ingredient
from recipebook.domain.ingredients.repositories import IngredientRepository
from recipebook.domain.pagination import Page
from recipebook.shared.errors import DuplicateIngredientError, IngredientNotFoundError


class ListIngredientsUseCase:
    """``term`` filters, ``page`` + ``pageSize`` together switch to paging."""

    def __init__(
        self,
        *,
        ingredients: IngredientRepository,
        max_page_size: int | None = None,
    ) -> None:
        self._ingredients = ingredients
        self._max_page_size = max_page_size

    def execute(self, params: Mapping[str, str]) -> Sequence[Ingredient] | Page[Ingredient]:
        term = (params.get(TERM_PARAM) or "").strip() or None
        page = params.get(PAGE_PARAM)
        page_size = params.get(PAGE_SIZE_PARAM)

        if page is not None and page_size is not None:
            page_number = parse_positive_int(PAGE_PARAM, page)
            size = parse_positive_int(PAGE_SIZE_PARAM, page_size, maximum=self._max_page_size)
            if term is None:
                return self._ingredients.list_page(page_number, size)
            return self._ingredients.search_page(term, page_number, size)

        if term is None:
            return self._ingredients.list_all()
        return self._ingredients.search(term)


class GetIngredientUseCase:
    def __init__(self, *, ingredients: IngredientRepository) -> None:
        self._ingredients = ingredients

    def execute(self, ingredient_id: int) -> Ingredient:
        ingredient = self._ingredients.find_by_id(ingredient_id)
        if ingredient is None:
            raise IngredientNotFoundError(ingredient_id)
        return ingredient


class SaveIngredientUseCase:
    """Insert when ``ingredient_id`` is None, otherwise rename in place."""

    def __init__(self, *, ingredients: IngredientRepository) -> None:
        self._ingredients = ingredients

    def execute(
        self, chef: ChefIdentity, name: str, ingredient_id: int | None = None
    ) -> Ingredient:
        name = name.strip()
        if ingredient_id is not None and self._ingredients.find_by_id(ingredient_id) is None:
            raise IngredientNotFoundError(ingredient_id)

        clash = self._ingredients.find_by_name(name)
        if clash is not None and clash.id != ingredient_id:
            raise DuplicateIngredientError(name)

        return self._ingredients.save(Ingredient(id=ingredient_id or 0, name=name))


class DeleteIngredientUseCase:
    def __init__(self, *, ingredients: IngredientRepository) -> None:
        self._ingredients = ingredients

    def execute(self, chef: ChefIdentity, ingredient_id: int) -> None:
        if not self._ingredients.delete(ingredient_id):
            raise IngredientNotFoundError(ingredient_id)
