from .base import (
    AppError,
    BadPaginationError,
    BadSortFieldError,
    DomainError,
    DuplicateIngredientError,
    IngredientNotFoundError,
    MissingTokenError,
    RecipeNotFoundError,
    RecipesNotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "BadPaginationError",
    "BadSortFieldError",
    "DomainError",
    "DuplicateIngredientError",
    "IngredientNotFoundError",
    "MissingTokenError",
    "RecipeNotFoundError",
    "RecipesNotFoundError",
    "UnauthenticatedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
