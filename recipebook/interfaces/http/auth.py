# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import TypeVar

from flask import Request, g, request

from recipebook.application.use_cases.chefs.authenticate_chef import AuthenticateChefUseCase
from recipebook.domain.chefs.entities import ChefIdentity
from recipebook.shared.errors import UnauthenticatedError
from recipebook.shared.logging import logger

AUTH_COOKIE = "auth_token"
BEARER_SCHEME = "bearer"

F = TypeVar("F", bound=Callable)


def extract_token(req: Request) -> str | None:
    """Bearer header first, then a bare Authorization value, then the cookie.

    The scheme is matched case-insensitively; a Bearer header with no
    credentials counts as absent.
    """

    header = req.headers.get("Authorization", "").strip()
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == BEARER_SCHEME:
        token = credentials.strip()
        if token:
            return token
    elif header:
        return header
    return req.cookies.get(AUTH_COOKIE) or None


def client_ip(req: Request) -> str | None:
    ip_address = req.headers.get("X-Forwarded-For", req.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


def session_required(authenticate: AuthenticateChefUseCase) -> Callable[[F], F]:
    """Resolve the request token to a chef or answer 401 via ``UnauthenticatedError``."""

    def decorator(f: F) -> F:
        @wraps(f)
        def inner(*args, **kwargs):
            try:
                chef = authenticate.execute(extract_token(request))
            except UnauthenticatedError:
                logger.warning(
                    f"Auth failed on {request.method} {request.path} from {client_ip(request)}"
                )
                raise
            g.chef = chef
            g.chef_id = chef.id
            logger.debug(f"Auth OK: chef={chef.id} {request.method} {request.path}")
            return f(*args, **kwargs)

        return inner  # type: ignore[return-value]

    return decorator


def current_chef() -> ChefIdentity:
    return g.chef


__all__ = ["AUTH_COOKIE", "client_ip", "current_chef", "extract_token", "session_required"]
