# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .chefs.entities import Chef, ChefIdentity, Session
from .exceptions import InvariantViolation, InvariantViolationError
from .ingredients.entities import Ingredient
from .pagination import Page, SortDirection
from .recipes.entities import SORTABLE_FIELDS, Recipe, RecipeIngredient

__all__ = [
    "Chef",
    "ChefIdentity",
    "Ingredient",
    "InvariantViolation",
    "InvariantViolationError",
    "Page",
    "Recipe",
    "RecipeIngredient",
    "SORTABLE_FIELDS",
    "Session",
    "SortDirection",
]
