"""Per-run variable environment construction."""

from __future__ import annotations

import uuid
from collections.abc import Mapping

from .engine_contracts import ComputedValue, Value

NEW_UUID_VARIABLE = "newUuid"


def _new_uuid() -> Value:
    return str(uuid.uuid4())


def build_variable_environment(variables: Mapping[str, Value]) -> dict[str, Value]:
    """Merge caller variables with the built-in computed variables.

    A fresh mapping is returned for every run so engines may mutate it freely.
    Caller variables win over built-ins of the same name.
    """
    environment: dict[str, Value] = {NEW_UUID_VARIABLE: ComputedValue(_new_uuid)}
    environment.update(variables)
    return environment
