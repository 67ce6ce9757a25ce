# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from recipebook.domain.ingredients.entities import Ingredient as DomainIngredient
from recipebook.domain.ingredients.repositories import IngredientRepository
from recipebook.domain.pagination import Page, page_offset
from recipebook.infrastructure.db.models import Ingredient
from recipebook.infrastructure.repositories.recipes.sqlalchemy_recipe_repository import (
    contains_pattern,
)
from recipebook.infrastructure.unit_of_work import unit_of_work_scope
from recipebook.shared.errors import DuplicateIngredientError, IngredientNotFoundError


def _to_domain(row: Ingredient) -> DomainIngredient:
    return DomainIngredient(id=row.id, name=row.name)


def _name_contains(term: str) -> ColumnElement[bool]:
    return Ingredient.name.ilike(contains_pattern(term), escape="\\")


class SqlAlchemyIngredientRepository(IngredientRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_id(self, ingredient_id: int) -> DomainIngredient | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Ingredient, ingredient_id)
            return _to_domain(row) if row else None

    def find_by_name(self, name: str) -> DomainIngredient | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(
                select(Ingredient).where(func.lower(Ingredient.name) == name.casefold())
            ).first()
            return _to_domain(row) if row else None

    def list_all(self) -> Sequence[DomainIngredient]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(select(Ingredient).order_by(Ingredient.id.asc())).all()
            return [_to_domain(row) for row in rows]

    def search(self, term: str) -> Sequence[DomainIngredient]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                select(Ingredient).where(_name_contains(term)).order_by(Ingredient.id.asc())
            ).all()
            return [_to_domain(row) for row in rows]

    def list_page(self, page_number: int, page_size: int) -> Page[DomainIngredient]:
        return self._page(None, page_number, page_size)

    def search_page(self, term: str, page_number: int, page_size: int) -> Page[DomainIngredient]:
        return self._page(term, page_number, page_size)

    def _page(self, term: str | None, page_number: int, page_size: int) -> Page[DomainIngredient]:
        stmt = select(Ingredient)
        count_stmt = select(func.count(Ingredient.id))
        if term:
            stmt = stmt.where(_name_contains(term))
            count_stmt = count_stmt.where(_name_contains(term))
        stmt = (
            stmt.order_by(Ingredient.id.asc())
            .offset(page_offset(page_number, page_size))
            .limit(page_size)
        )
        with unit_of_work_scope(self._session_factory) as session:
            total_items = session.scalar(count_stmt) or 0
            items = [_to_domain(row) for row in session.scalars(stmt).all()]
        return Page.from_slice(
            items, page_number=page_number, page_size=page_size, total_items=total_items
        )

    def save(self, ingredient: DomainIngredient) -> DomainIngredient:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                if ingredient.id == 0:
                    row = Ingredient(name=ingredient.name)
                    session.add(row)
                else:
                    row = session.get(Ingredient, ingredient.id)
                    if row is None:
                        raise IngredientNotFoundError(ingredient.id)
                    row.name = ingredient.name
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            raise DuplicateIngredientError(ingredient.name) from exc

    def delete(self, ingredient_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Ingredient, ingredient_id)
            if row is None:
                return False
            session.delete(row)
            return True
