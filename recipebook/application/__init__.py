# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.chefs.authenticate_chef import AuthenticateChefUseCase
from .use_cases.chefs.login_chef import LoginChefUseCase
from .use_cases.chefs.logout_chef import LogoutChefUseCase
from .use_cases.chefs.register_chef import RegisterChefUseCase
from .use_cases.recipes.delete_recipe import DeleteRecipeUseCase
from .use_cases.recipes.get_recipe import GetRecipeUseCase
from .use_cases.recipes.list_recipes import ListRecipesUseCase
from .use_cases.recipes.save_recipe import CreateRecipeUseCase, RecipeDraft, UpdateRecipeUseCase

__all__ = [
    "AuthenticateChefUseCase",
    "CreateRecipeUseCase",
    "DeleteRecipeUseCase",
    "GetRecipeUseCase",
    "ListRecipesUseCase",
    "LoginChefUseCase",
    "LogoutChefUseCase",
    "RecipeDraft",
    "RegisterChefUseCase",
    "UpdateRecipeUseCase",
]
