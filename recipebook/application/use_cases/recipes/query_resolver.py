# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Decide which recipe lookup a set of list parameters asks for.

The listing endpoint accepts overlapping parameters. They are interpreted with
a fixed precedence, first match wins:

    1. ``name``                  -> substring search on recipe names
    2. ``ingredient``            -> substring search on ingredient names
    3. ``page`` and ``pageSize`` -> filtered (``term``), sorted, paged query
    4. nothing of the above      -> every recipe, id ascending

Parameters belonging to a lower rule are ignored once a higher rule matches.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from recipebook.domain.pagination import Page, SortDirection
from recipebook.domain.recipes.entities import SORTABLE_FIELDS, Recipe
from recipebook.domain.recipes.repositories import RecipeRepository
from recipebook.shared.errors import BadPaginationError, BadSortFieldError

NAME_PARAM = "name"
INGREDIENT_PARAM = "ingredient"
TERM_PARAM = "term"
PAGE_PARAM = "page"
PAGE_SIZE_PARAM = "pageSize"
SORT_BY_PARAM = "sortBy"
SORT_DIRECTION_PARAM = "sortDirection"

DEFAULT_SORT_BY = "id"


@dataclass(slots=True, frozen=True)
class ByName:
    term: str


@dataclass(slots=True, frozen=True)
class ByIngredient:
    term: str


@dataclass(slots=True, frozen=True)
class PagedSearch:
    term: str | None
    page_number: int
    page_size: int
    sort_by: str = DEFAULT_SORT_BY
    sort_direction: SortDirection = SortDirection.ASC


@dataclass(slots=True, frozen=True)
class ListAll:
    pass


RecipeQuery = ByName | ByIngredient | PagedSearch | ListAll


def parse_positive_int(name: str, raw: str, *, maximum: int | None = None) -> int:
    try:
        value = int(raw.strip())
    except (AttributeError, ValueError):
        raise BadPaginationError(name, raw) from None
    if value < 1 or (maximum is not None and value > maximum):
        raise BadPaginationError(name, raw)
    return value


def _parse_sort_by(raw: str | None) -> str:
    if raw is None or not raw.strip():
        return DEFAULT_SORT_BY
    sort_by = raw.strip()
    if sort_by not in SORTABLE_FIELDS:
        raise BadSortFieldError(sort_by, list(SORTABLE_FIELDS))
    return sort_by


def resolve_recipe_query(
    params: Mapping[str, str], *, max_page_size: int | None = None
) -> RecipeQuery:
    name = params.get(NAME_PARAM)
    if name is not None:
        return ByName(term=name)

    ingredient = params.get(INGREDIENT_PARAM)
    if ingredient is not None:
        return ByIngredient(term=ingredient)

    page = params.get(PAGE_PARAM)
    page_size = params.get(PAGE_SIZE_PARAM)
    if page is not None and page_size is not None:
        term = params.get(TERM_PARAM)
        return PagedSearch(
            term=term if term and term.strip() else None,
            page_number=parse_positive_int(PAGE_PARAM, page),
            page_size=parse_positive_int(PAGE_SIZE_PARAM, page_size, maximum=max_page_size),
            sort_by=_parse_sort_by(params.get(SORT_BY_PARAM)),
            sort_direction=SortDirection.parse(params.get(SORT_DIRECTION_PARAM)),
        )

    return ListAll()


def execute_recipe_query(
    query: RecipeQuery, recipes: RecipeRepository
) -> Sequence[Recipe] | Page[Recipe]:
    match query:
        case ByName(term=term):
            return recipes.search_by_name(term)
        case ByIngredient(term=term):
            return recipes.search_by_ingredient(term)
        case PagedSearch():
            return recipes.search_paged(
                query.term,
                query.page_number,
                query.page_size,
                query.sort_by,
                query.sort_direction,
            )
        case _:
            return recipes.list_all()


__all__ = [
    "ByIngredient",
    "ByName",
    "ListAll",
    "PagedSearch",
    "RecipeQuery",
    "execute_recipe_query",
    "parse_positive_int",
    "resolve_recipe_query",
]
