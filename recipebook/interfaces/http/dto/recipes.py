# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from recipebook.application.use_cases.recipes.save_recipe import RecipeDraft
from recipebook.domain.recipes.entities import RecipeIngredient


class RecipeIngredientDTO(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    amount: float | None = Field(default=None, ge=0)
    unit: str | None = Field(default=None, max_length=32)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class RecipeRequestDTO(BaseModel):
    name: str = Field(min_length=1, max_length=256)
    instructions: str = Field(default="", max_length=20_000)
    ingredients: list[RecipeIngredientDTO] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    def to_draft(self) -> RecipeDraft:
        return RecipeDraft(
            name=self.name,
            instructions=self.instructions,
            ingredients=tuple(
                RecipeIngredient(name=item.name, amount=item.amount, unit=item.unit)
                for item in self.ingredients
            ),
        )


class IngredientRequestDTO(BaseModel):
    name: str = Field(min_length=1, max_length=128)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value
