# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        super().__init__(code=resolved_code, status=resolved_status, context=context)


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            context=context,
        )


class UnauthenticatedError(AppError):
    def __init__(self) -> None:
        super().__init__(code="unauthenticated", status=HTTPStatus.UNAUTHORIZED)


class MissingTokenError(AppError):
    def __init__(self) -> None:
        super().__init__(code="missing_token", status=HTTPStatus.BAD_REQUEST)


class BadPaginationError(ValidationError):
    def __init__(self, field: str, value: object) -> None:
        super().__init__(
            code="bad_pagination",
            context={"field": field, "value": value},
        )


class BadSortFieldError(ValidationError):
    def __init__(self, sort_by: str, allowed: list[str]) -> None:
        super().__init__(
            code="bad_sort_field",
            context={"sort_by": sort_by, "allowed": allowed},
        )


class RecipeNotFoundError(AppError):
    def __init__(self, recipe_id: int) -> None:
        super().__init__(
            code="recipe_not_found",
            status=HTTPStatus.NOT_FOUND,
            context={"recipe_id": recipe_id},
        )


class RecipesNotFoundError(AppError):
    def __init__(self) -> None:
        super().__init__(code="recipes_not_found", status=HTTPStatus.NOT_FOUND)


class IngredientNotFoundError(AppError):
    def __init__(self, ingredient_id: int) -> None:
        super().__init__(
            code="ingredient_not_found",
            status=HTTPStatus.NOT_FOUND,
            context={"ingredient_id": ingredient_id},
        )


class DuplicateIngredientError(AppError):
    def __init__(self, name: str) -> None:
        super().__init__(
            code="duplicate_ingredient",
            status=HTTPStatus.CONFLICT,
            context={"name": name},
        )
