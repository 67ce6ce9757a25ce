# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

_USERNAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9_.-]*$")


class RegisterRequestDTO(BaseModel):
    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=8, max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if not _USERNAME_RE.match(value):
            raise PydanticCustomError(
                "username_invalid_chars",
                "Username must start with a letter and contain only letters, digits, '_', '.' or '-'",
                {"pattern": _USERNAME_RE.pattern},
            )
        return value

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, value: str) -> str:
        if not re.search(r"[A-Za-z]", value):
            raise PydanticCustomError(
                "password_no_letter",
                "Password must contain at least one letter",
                {},
            )
        if not re.search(r"\d", value):
            raise PydanticCustomError(
                "password_no_digit",
                "Password must contain at least one digit",
                {},
            )
        return value


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)  # No strength check on login


class ChefDTO(BaseModel):
    id: int
    username: str


class TokenDTO(BaseModel):
    token: str


class OkDTO(BaseModel):
    ok: bool = True
