"""Execution engine discovery and loading."""

from __future__ import annotations

import importlib
import importlib.metadata
import logging
from typing import cast

from .engine_contracts import Engine

ENGINE_ENTRY_POINT_GROUP = "simple_http_tester.engines"

_LOGGER = logging.getLogger("simple_http_tester.execution")


class EngineLoadError(Exception):
    """Raised when no usable execution engine can be resolved."""


def load_engine(reference: str | None = None) -> Engine:
    """Resolve the execution engine.

    An explicit `module:attribute` reference wins; otherwise the single engine
    registered under the `simple_http_tester.engines` entry point group is used.
    """
    if reference:
        return _load_reference(reference)
    return _load_registered_engine()


def _load_reference(reference: str) -> Engine:
    module_name, separator, attribute = reference.partition(":")
    if not separator or not module_name or not attribute:
        raise EngineLoadError(f"Engine reference must look like 'module:attribute': {reference}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise EngineLoadError(f"Cannot import engine module '{module_name}': {exc}") from exc
    target: object = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise EngineLoadError(f"Engine '{reference}' not found.") from exc
    if not callable(target):
        raise EngineLoadError(f"Engine '{reference}' is not callable.")
    _LOGGER.debug("Using engine %s", reference)
    return cast(Engine, target)


def _load_registered_engine() -> Engine:
    entry_points = list(importlib.metadata.entry_points().select(group=ENGINE_ENTRY_POINT_GROUP))
    if not entry_points:
        raise EngineLoadError(
            "No execution engine available: pass --engine module:attribute or install "
            f"a package registering the '{ENGINE_ENTRY_POINT_GROUP}' entry point."
        )
    if len(entry_points) > 1:
        names = ", ".join(sorted(entry_point.name for entry_point in entry_points))
        raise EngineLoadError(f"Several execution engines installed ({names}); pass --engine.")
    entry_point = entry_points[0]
    try:
        engine = entry_point.load()
    except ImportError as exc:
        raise EngineLoadError(f"Cannot load engine '{entry_point.name}': {exc}") from exc
    _LOGGER.debug("Using engine entry point %s", entry_point.name)
    return cast(Engine, engine)
