# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.orm import Session, selectinload

from recipebook.domain.pagination import Page, SortDirection, page_offset
from recipebook.domain.recipes.entities import SORTABLE_FIELDS
from recipebook.domain.recipes.entities import Recipe as DomainRecipe
from recipebook.domain.recipes.entities import RecipeIngredient as DomainRecipeIngredient
from recipebook.domain.recipes.repositories import RecipeRepository
from recipebook.infrastructure.db.models import Recipe, RecipeIngredient
from recipebook.infrastructure.unit_of_work import unit_of_work_scope
from recipebook.shared.errors import BadSortFieldError, RecipeNotFoundError
from recipebook.shared.logging import logger

_SORT_COLUMNS = {
    "id": Recipe.id,
    "name": Recipe.name,
    "instructions": Recipe.instructions,
    "author_id": Recipe.author_id,
}


def contains_pattern(term: str) -> str:
    """LIKE pattern matching ``term`` literally anywhere in the value."""

    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _name_contains(term: str) -> ColumnElement[bool]:
    return Recipe.name.ilike(contains_pattern(term), escape="\\")


def _ingredient_contains(term: str) -> ColumnElement[bool]:
    return Recipe.ingredients.any(
        RecipeIngredient.name.ilike(contains_pattern(term), escape="\\")
    )


def _to_domain(row: Recipe) -> DomainRecipe:
    return DomainRecipe(
        id=row.id,
        name=row.name,
        instructions=row.instructions or "",
        ingredients=tuple(
            DomainRecipeIngredient(name=item.name, amount=item.amount, unit=item.unit)
            for item in row.ingredients
        ),
        author_id=row.author_id,
    )


def _ingredient_rows(recipe: DomainRecipe) -> list[RecipeIngredient]:
    return [
        RecipeIngredient(position=pos, name=item.name, amount=item.amount, unit=item.unit)
        for pos, item in enumerate(recipe.ingredients)
    ]


class SqlAlchemyRecipeRepository(RecipeRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    @staticmethod
    def _select() -> Select[tuple[Recipe]]:
        return select(Recipe).options(selectinload(Recipe.ingredients))

    def _fetch(self, stmt: Select[tuple[Recipe]]) -> list[DomainRecipe]:
        with unit_of_work_scope(self._session_factory) as session:
            return [_to_domain(row) for row in session.scalars(stmt).all()]

    def find_by_id(self, recipe_id: int) -> DomainRecipe | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Recipe, recipe_id, options=[selectinload(Recipe.ingredients)])
            return _to_domain(row) if row else None

    def list_all(self) -> Sequence[DomainRecipe]:
        return self._fetch(self._select().order_by(Recipe.id.asc()))

    def search_by_name(self, term: str) -> Sequence[DomainRecipe]:
        return self._fetch(self._select().where(_name_contains(term)).order_by(Recipe.id.asc()))

    def search_by_ingredient(self, term: str) -> Sequence[DomainRecipe]:
        return self._fetch(
            self._select().where(_ingredient_contains(term)).order_by(Recipe.id.asc())
        )

    def search_paged(
        self,
        term: str | None,
        page_number: int,
        page_size: int,
        sort_by: str = "id",
        sort_direction: SortDirection = SortDirection.ASC,
    ) -> Page[DomainRecipe]:
        column = _SORT_COLUMNS.get(sort_by)
        if column is None:
            raise BadSortFieldError(sort_by, list(SORTABLE_FIELDS))
        ordering = column.desc() if sort_direction is SortDirection.DESC else column.asc()

        stmt = self._select()
        count_stmt = select(func.count(Recipe.id))
        if term:
            stmt = stmt.where(_name_contains(term))
            count_stmt = count_stmt.where(_name_contains(term))

        stmt = (
            stmt.order_by(ordering, Recipe.id.asc())
            .offset(page_offset(page_number, page_size))
            .limit(page_size)
        )

        with unit_of_work_scope(self._session_factory) as session:
            total_items = session.scalar(count_stmt) or 0
            items = [_to_domain(row) for row in session.scalars(stmt).all()]

        logger.debug(
            f"recipes.search_paged: term={term!r} page={page_number} size={page_size} "
            f"sort={sort_by}:{sort_direction.value} total={total_items}"
        )
        return Page.from_slice(
            items, page_number=page_number, page_size=page_size, total_items=total_items
        )

    def save(self, recipe: DomainRecipe) -> DomainRecipe:
        with unit_of_work_scope(self._session_factory) as session:
            if recipe.is_new:
                row = Recipe(
                    name=recipe.name,
                    instructions=recipe.instructions,
                    author_id=recipe.author_id,
                    ingredients=_ingredient_rows(recipe),
                )
                session.add(row)
            else:
                row = session.get(Recipe, recipe.id, options=[selectinload(Recipe.ingredients)])
                if row is None:
                    raise RecipeNotFoundError(recipe.id)
                row.name = recipe.name
                row.instructions = recipe.instructions
                row.author_id = recipe.author_id
                row.ingredients = _ingredient_rows(recipe)
            session.flush()
            return _to_domain(row)

    def delete(self, recipe_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Recipe, recipe_id)
            if row is None:
                return False
            session.delete(row)
            return True
