"""Levels package with dynamic loader utilities.

- list_available_levels(): discover level module names in this package
- load_level_plan(name): import module and return its text PLAN
- create_level(name): parse the plan into a core.level.Level
"""

from __future__ import annotations

import importlib
import os
import pkgutil
from typing import List

from core.level import Level
from core.parser import DEFAULT_ACTORS, LevelParser


def _package_path() -> str:
    return os.path.dirname(__file__)


def list_available_levels() -> List[str]:
    """Return available level module names (filenames without extension)."""
    modules: List[str] = []
    for mod in pkgutil.iter_modules([_package_path()]):
        name = mod.name
        if name.startswith("level_"):
            modules.append(name)
    modules.sort()
    return modules


def load_level_plan(name: str) -> list[str]:
    """
    Load the PLAN rows from a level module (e.g., "level_intro").
    Raises ImportError/ValueError on failure.
    """
    module_name = name.strip().lower().replace("-", "_")
    if not module_name or module_name.startswith("."):
        raise ValueError(f"Invalid level name: {name!r}")

    module = importlib.import_module(f"levels.{module_name}")
    plan = getattr(module, "PLAN", None)
    if not isinstance(plan, (list, tuple)) or not all(isinstance(r, str) for r in plan):
        raise ValueError(f"No PLAN found in module 'levels.{module_name}'")
    return list(plan)


def create_level(name: str, parser: LevelParser | None = None) -> Level:
    """Parse a level by module name."""
    parser = parser or LevelParser(DEFAULT_ACTORS)
    return parser.parse(load_level_plan(name))


__all__ = [
    "list_available_levels",
    "load_level_plan",
    "create_level",
]
