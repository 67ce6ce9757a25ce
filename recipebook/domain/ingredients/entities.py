# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from recipebook.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class Ingredient:
    """Catalogue entry; recipes reference ingredients by name."""

    id: int
    name: str

    def __post_init__(self) -> None:
        if self.id < 0:
            raise InvariantViolation("ingredient id cannot be negative", field="id")
        if not self.name or not self.name.strip():
            raise InvariantViolation("ingredient name must not be blank", field="name")

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}
