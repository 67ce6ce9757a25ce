# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from recipebook.application.use_cases.chefs.authenticate_chef import AuthenticateChefUseCase
from recipebook.application.use_cases.recipes.delete_recipe import DeleteRecipeUseCase
from recipebook.application.use_cases.recipes.get_recipe import GetRecipeUseCase
from recipebook.application.use_cases.recipes.list_recipes import ListRecipesUseCase
from recipebook.application.use_cases.recipes.save_recipe import (
    CreateRecipeUseCase,
    UpdateRecipeUseCase,
)
from recipebook.domain.pagination import Page
from recipebook.domain.recipes.entities import Recipe
from recipebook.infrastructure.audit import AuditAction, audit_log
from recipebook.interfaces.http.auth import client_ip, current_chef, session_required
from recipebook.interfaces.http.dto.auth import OkDTO
from recipebook.interfaces.http.dto.recipes import RecipeRequestDTO
from recipebook.shared.errors import RecipesNotFoundError
from recipebook.shared.errors.validation import raise_validation_error
from recipebook.shared.logging import logger


def _recipe_request() -> RecipeRequestDTO:
    try:
        return RecipeRequestDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class RecipesController:
    def __init__(
        self,
        *,
        authenticate: AuthenticateChefUseCase,
        list_use_case: ListRecipesUseCase,
        get_use_case: GetRecipeUseCase,
        create_use_case: CreateRecipeUseCase,
        update_use_case: UpdateRecipeUseCase,
        delete_use_case: DeleteRecipeUseCase,
    ) -> None:
        self._authenticate = authenticate
        self._list = list_use_case
        self._get = get_use_case
        self._create = create_use_case
        self._update = update_use_case
        self._delete = delete_use_case

    def list_recipes(self) -> tuple[Response, int]:
        result = self._list.execute(request.args.to_dict())
        if isinstance(result, Page):
            return jsonify(result.to_dict(Recipe.to_dict)), 200
        if not result:
            raise RecipesNotFoundError()
        return jsonify([recipe.to_dict() for recipe in result]), 200

    def get_recipe(self, recipe_id: int) -> tuple[Response, int]:
        return jsonify(self._get.execute(recipe_id).to_dict()), 200

    def create_recipe(self) -> tuple[Response, int]:
        chef = current_chef()
        dto = _recipe_request()
        recipe = self._create.execute(chef, dto.to_draft())
        audit_log(
            AuditAction.RECIPE_CREATED,
            chef_id=chef.id,
            ip_address=client_ip(request),
            details={"recipe_id": recipe.id, "name": recipe.name},
        )
        logger.info(f"recipes.create: ok id={recipe.id} chef_id={chef.id}")
        return jsonify(recipe.to_dict()), 201

    def update_recipe(self, recipe_id: int) -> tuple[Response, int]:
        chef = current_chef()
        dto = _recipe_request()
        recipe = self._update.execute(chef, recipe_id, dto.to_draft())
        audit_log(
            AuditAction.RECIPE_UPDATED,
            chef_id=chef.id,
            ip_address=client_ip(request),
            details={"recipe_id": recipe.id},
        )
        return jsonify(recipe.to_dict()), 200

    def delete_recipe(self, recipe_id: int) -> tuple[Response, int]:
        chef = current_chef()
        self._delete.execute(chef, recipe_id)
        audit_log(
            AuditAction.RECIPE_DELETED,
            chef_id=chef.id,
            ip_address=client_ip(request),
            details={"recipe_id": recipe_id},
        )
        return jsonify(OkDTO().model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        authed = session_required(self._authenticate)
        bp = Blueprint("recipes", __name__, url_prefix="/api/recipes")
        bp.add_url_rule("", view_func=self.list_recipes, methods=["GET"])
        bp.add_url_rule("", view_func=authed(self.create_recipe), methods=["POST"])
        bp.add_url_rule("/<int:recipe_id>", view_func=self.get_recipe, methods=["GET"])
        bp.add_url_rule(
            "/<int:recipe_id>", view_func=authed(self.update_recipe), methods=["PUT"]
        )
        bp.add_url_rule(
            "/<int:recipe_id>", view_func=authed(self.delete_recipe), methods=["DELETE"]
        )
        return bp
