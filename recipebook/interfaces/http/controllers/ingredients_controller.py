# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from recipebook.application.use_cases.chefs.authenticate_chef import AuthenticateChefUseCase
from recipebook.application.use_cases.ingredients.manage_ingredients import (
    DeleteIngredientUseCase,
    GetIngredientUseCase,
    ListIngredientsUseCase,
    SaveIngredientUseCase,
)
from recipebook.domain.ingredients.entities import Ingredient
from recipebook.domain.pagination import Page
from recipebook.infrastructure.audit import AuditAction, audit_log
from recipebook.interfaces.http.auth import client_ip, current_chef, session_required
from recipebook.interfaces.http.dto.auth import OkDTO
from recipebook.interfaces.http.dto.recipes import IngredientRequestDTO
from recipebook.shared.errors.validation import raise_validation_error


def _ingredient_request() -> IngredientRequestDTO:
    try:
        return IngredientRequestDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class IngredientsController:
    def __init__(
        self,
        *,
        authenticate: AuthenticateChefUseCase,
        list_use_case: ListIngredientsUseCase,
        get_use_case: GetIngredientUseCase,
        save_use_case: SaveIngredientUseCase,
        delete_use_case: DeleteIngredientUseCase,
    ) -> None:
        self._authenticate = authenticate
        self._list = list_use_case
        self._get = get_use_case
        self._save = save_use_case
        self._delete = delete_use_case

    def list_ingredients(self) -> tuple[Response, int]:
        result = self._list.execute(request.args.to_dict())
        if isinstance(result, Page):
            return jsonify(result.to_dict(Ingredient.to_dict)), 200
        return jsonify([item.to_dict() for item in result]), 200

    def get_ingredient(self, ingredient_id: int) -> tuple[Response, int]:
        return jsonify(self._get.execute(ingredient_id).to_dict()), 200

    def create_ingredient(self) -> tuple[Response, int]:
        chef = current_chef()
        ingredient = self._save.execute(chef, _ingredient_request().name)
        audit_log(
            AuditAction.INGREDIENT_CREATED,
            chef_id=chef.id,
            ip_address=client_ip(request),
            details={"ingredient_id": ingredient.id, "name": ingredient.name},
        )
        return jsonify(ingredient.to_dict()), 201

    def update_ingredient(self, ingredient_id: int) -> tuple[Response, int]:
        chef = current_chef()
        ingredient = self._save.execute(chef, _ingredient_request().name, ingredient_id)
        audit_log(
            AuditAction.INGREDIENT_UPDATED,
            chef_id=chef.id,
            ip_address=client_ip(request),
            details={"ingredient_id": ingredient.id, "name": ingredient.name},
        )
        return jsonify(ingredient.to_dict()), 200

    def delete_ingredient(self, ingredient_id: int) -> tuple[Response, int]:
        chef = current_chef()
        self._delete.execute(chef, ingredient_id)
        audit_log(
            AuditAction.INGREDIENT_DELETED,
            chef_id=chef.id,
            ip_address=client_ip(request),
            details={"ingredient_id": ingredient_id},
        )
        return jsonify(OkDTO().model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        authed = session_required(self._authenticate)
        bp = Blueprint("ingredients", __name__, url_prefix="/api/ingredients")
        bp.add_url_rule("", view_func=self.list_ingredients, methods=["GET"])
        bp.add_url_rule("", view_func=authed(self.create_ingredient), methods=["POST"])
        bp.add_url_rule("/<int:ingredient_id>", view_func=self.get_ingredient, methods=["GET"])
        bp.add_url_rule(
            "/<int:ingredient_id>", view_func=authed(self.update_ingredient), methods=["PUT"]
        )
        bp.add_url_rule(
            "/<int:ingredient_id>", view_func=authed(self.delete_ingredient), methods=["DELETE"]
        )
        return bp
