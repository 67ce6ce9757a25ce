# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from functools import cached_property

from sqlalchemy import Engine
from sqlalchemy.orm import Session

from recipebook.application.services.password_hashing import WerkzeugPasswordHasher
from recipebook.application.use_cases.chefs.authenticate_chef import AuthenticateChefUseCase
from recipebook.application.use_cases.chefs.login_chef import LoginChefUseCase
from recipebook.application.use_cases.chefs.logout_chef import LogoutChefUseCase
from recipebook.application.use_cases.chefs.register_chef import RegisterChefUseCase
from recipebook.application.use_cases.ingredients.manage_ingredients import (
    DeleteIngredientUseCase,
    GetIngredientUseCase,
    ListIngredientsUseCase,
    SaveIngredientUseCase,
)
from recipebook.application.use_cases.recipes.delete_recipe import DeleteRecipeUseCase
from recipebook.application.use_cases.recipes.get_recipe import GetRecipeUseCase
from recipebook.application.use_cases.recipes.list_recipes import ListRecipesUseCase
from recipebook.application.use_cases.recipes.save_recipe import (
    CreateRecipeUseCase,
    UpdateRecipeUseCase,
)
from recipebook.infrastructure.db import ENGINE, SessionLocal
from recipebook.infrastructure.repositories.chefs.sqlalchemy_chef_repository import (
    SqlAlchemyChefRepository,
)
from recipebook.infrastructure.repositories.ingredients.sqlalchemy_ingredient_repository import (
    SqlAlchemyIngredientRepository,
)
from recipebook.infrastructure.repositories.recipes.sqlalchemy_recipe_repository import (
    SqlAlchemyRecipeRepository,
)
from recipebook.infrastructure.sessions.in_memory_registry import InMemorySessionRegistry
from recipebook.interfaces.http.controllers.auth_controller import AuthController
from recipebook.interfaces.http.controllers.ingredients_controller import IngredientsController
from recipebook.interfaces.http.controllers.misc_controller import MiscController
from recipebook.interfaces.http.controllers.recipes_controller import RecipesController
from recipebook.shared.config import AppConfig, load_config
from recipebook.shared.logging import logger


class Container:
    def __init__(
        self,
        *,
        session_factory: Callable[[], Session] = SessionLocal,
        engine: Engine = ENGINE,
        config: AppConfig | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.engine = engine
        self.config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def chef_repository(self) -> SqlAlchemyChefRepository:
        return SqlAlchemyChefRepository(self.session_factory, self.password_hasher)

    @cached_property
    def session_registry(self) -> InMemorySessionRegistry:
        return InMemorySessionRegistry(ttl=timedelta(seconds=self.config.sessions.ttl_seconds))

    @cached_property
    def recipe_repository(self) -> SqlAlchemyRecipeRepository:
        return SqlAlchemyRecipeRepository(self.session_factory)

    @cached_property
    def ingredient_repository(self) -> SqlAlchemyIngredientRepository:
        return SqlAlchemyIngredientRepository(self.session_factory)

    # Chef use cases

    @cached_property
    def register_chef_use_case(self) -> RegisterChefUseCase:
        return RegisterChefUseCase(
            chefs=self.chef_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_chef_use_case(self) -> LoginChefUseCase:
        return LoginChefUseCase(chefs=self.chef_repository, sessions=self.session_registry)

    @cached_property
    def logout_chef_use_case(self) -> LogoutChefUseCase:
        return LogoutChefUseCase(sessions=self.session_registry)

    @cached_property
    def authenticate_chef_use_case(self) -> AuthenticateChefUseCase:
        return AuthenticateChefUseCase(sessions=self.session_registry)

    # Recipe use cases

    @cached_property
    def list_recipes_use_case(self) -> ListRecipesUseCase:
        return ListRecipesUseCase(
            recipes=self.recipe_repository,
            max_page_size=self.config.pagination.max_page_size,
        )

    @cached_property
    def get_recipe_use_case(self) -> GetRecipeUseCase:
        return GetRecipeUseCase(recipes=self.recipe_repository)

    @cached_property
    def create_recipe_use_case(self) -> CreateRecipeUseCase:
        return CreateRecipeUseCase(recipes=self.recipe_repository)

    @cached_property
    def update_recipe_use_case(self) -> UpdateRecipeUseCase:
        return UpdateRecipeUseCase(recipes=self.recipe_repository)

    @cached_property
    def delete_recipe_use_case(self) -> DeleteRecipeUseCase:
        return DeleteRecipeUseCase(recipes=self.recipe_repository)

    # Ingredient use cases

    @cached_property
    def list_ingredients_use_case(self) -> ListIngredientsUseCase:
        return ListIngredientsUseCase(
            ingredients=self.ingredient_repository,
            max_page_size=self.config.pagination.max_page_size,
        )

    @cached_property
    def get_ingredient_use_case(self) -> GetIngredientUseCase:
        return GetIngredientUseCase(ingredients=self.ingredient_repository)

    @cached_property
    def save_ingredient_use_case(self) -> SaveIngredientUseCase:
        return SaveIngredientUseCase(ingredients=self.ingredient_repository)

    @cached_property
    def delete_ingredient_use_case(self) -> DeleteIngredientUseCase:
        return DeleteIngredientUseCase(ingredients=self.ingredient_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_chef_use_case,
            login_use_case=self.login_chef_use_case,
            logout_use_case=self.logout_chef_use_case,
            config=self.config,
        )

    @cached_property
    def recipes_controller(self) -> RecipesController:
        return RecipesController(
            authenticate=self.authenticate_chef_use_case,
            list_use_case=self.list_recipes_use_case,
            get_use_case=self.get_recipe_use_case,
            create_use_case=self.create_recipe_use_case,
            update_use_case=self.update_recipe_use_case,
            delete_use_case=self.delete_recipe_use_case,
        )

    @cached_property
    def ingredients_controller(self) -> IngredientsController:
        return IngredientsController(
            authenticate=self.authenticate_chef_use_case,
            list_use_case=self.list_ingredients_use_case,
            get_use_case=self.get_ingredient_use_case,
            save_use_case=self.save_ingredient_use_case,
            delete_use_case=self.delete_ingredient_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine, sessions=self.session_registry)

    def shutdown(self) -> None:
        """Drop in-process state; persisted chefs and recipes survive."""

        if "session_registry" in self.__dict__:
            self.session_registry.clear()
        logger.info("container: shutdown complete")


container = Container()
