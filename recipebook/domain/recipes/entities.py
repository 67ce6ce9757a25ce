# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Recipe aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from recipebook.domain.exceptions import InvariantViolation

SORTABLE_FIELDS: tuple[str, ...] = ("id", "name", "instructions", "author_id")


@dataclass(slots=True, frozen=True)
class RecipeIngredient:
    """An ingredient line inside a recipe."""

    name: str
    amount: float | None = None
    unit: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvariantViolation("ingredient name must not be blank", field="name")
        if self.amount is not None and self.amount < 0:
            raise InvariantViolation("amount cannot be negative", field="amount")


@dataclass(slots=True, frozen=True)
class Recipe:
    """A named dish; ``id == 0`` until the repository persists it."""

    id: int
    name: str
    instructions: str = ""
    ingredients: tuple[RecipeIngredient, ...] = field(default_factory=tuple)
    author_id: int | None = None

    def __post_init__(self) -> None:
        if self.id < 0:
            raise InvariantViolation("recipe id cannot be negative", field="id")
        if not self.name or not self.name.strip():
            raise InvariantViolation("recipe name must not be blank", field="name")
        object.__setattr__(self, "ingredients", tuple(self.ingredients))

    @property
    def is_new(self) -> bool:
        return self.id == 0

    def with_id(self, recipe_id: int) -> Recipe:
        return replace(self, id=recipe_id)

    def matches_name(self, term: str) -> bool:
        return term.casefold() in self.name.casefold()

    def matches_ingredient(self, term: str) -> bool:
        needle = term.casefold()
        return any(needle in item.name.casefold() for item in self.ingredients)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "instructions": self.instructions,
            "author_id": self.author_id,
            "ingredients": [
                {"name": item.name, "amount": item.amount, "unit": item.unit}
                for item in self.ingredients
            ],
        }

