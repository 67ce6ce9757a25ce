# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from recipebook.application.use_cases.chefs.login_chef import LoginChefUseCase
from recipebook.application.use_cases.chefs.logout_chef import LogoutChefUseCase
from recipebook.application.use_cases.chefs.register_chef import RegisterChefUseCase
from recipebook.domain.chefs.exceptions import InvalidCredentialsError
from recipebook.infrastructure.audit import AuditAction, audit_log
from recipebook.interfaces.http.auth import AUTH_COOKIE, client_ip, extract_token
from recipebook.interfaces.http.dto.auth import (
    ChefDTO,
    LoginRequestDTO,
    OkDTO,
    RegisterRequestDTO,
    TokenDTO,
)
from recipebook.shared.config import AppConfig, load_config
from recipebook.shared.errors import MissingTokenError
from recipebook.shared.errors.validation import raise_validation_error
from recipebook.shared.logging import logger
from recipebook.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterChefUseCase,
        login_use_case: LoginChefUseCase,
        logout_use_case: LogoutChefUseCase,
        config: AppConfig | None = None,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._config = config or load_config()

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        chef = self._register_use_case.execute(dto.username, dto.password)

        audit_log(
            AuditAction.REGISTER,
            chef_id=chef.id,
            ip_address=client_ip(request),
            details={"username": dto.username},
        )
        logger.info(f"auth.register: ok chef_id={chef.id}")
        return jsonify(ChefDTO(id=chef.id, username=chef.username).model_dump()), 201

    @rate_limit(limit=10, window_seconds=60.0)
    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = client_ip(request)
        try:
            token = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username},
                success=False,
            )
            raise
        audit_log(
            AuditAction.LOGIN_SUCCESS,
            ip_address=ip_address,
            details={"username": dto.username},
        )

        response = jsonify(TokenDTO(token=token).model_dump())
        response.headers["Authorization"] = token
        ttl = self._config.sessions.ttl_seconds
        response.set_cookie(
            AUTH_COOKIE,
            token,
            httponly=True,
            samesite=self._config.security.cookie_samesite,
            secure=self._config.security.cookie_secure,
            max_age=ttl or None,
        )
        logger.info(f"auth.login: ok username={dto.username}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        token = extract_token(request)
        if not token:
            raise MissingTokenError()

        self._logout_use_case.execute(token)

        audit_log(AuditAction.LOGOUT, ip_address=client_ip(request))

        response = jsonify(OkDTO().model_dump())
        response.delete_cookie(AUTH_COOKIE)
        logger.info("auth.logout: ok")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
