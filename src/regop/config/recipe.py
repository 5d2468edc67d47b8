#!/usr/bin/env python3
"""
REGOP RECIPES
-------------
A recipe is a YAML file holding a reusable run configuration, e.g.

    lines: false
    regex:
      - 'version = "(?<major>\\d+)\\.(?<minor>\\d+)\\.(?<patch>\\d+)"'
    op:
      - "<minor>:inc"
      - "<patch>:rep:0"

`regex` and `op` accept a single string or a list of strings.

Author: Regop Team
Date: 2026-10-19
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Tuple

from ruamel.yaml import YAML, YAMLError

from regop.core.errors import RecipeError
from regop.core.models import Operator, Pattern
from regop.editing.compiler import PatternCompiler
from regop.editing.parser import OperatorParser

logger = logging.getLogger("regop.recipe")

KNOWN_KEYS = {"regex", "op", "lines"}


@dataclass
class Recipe:
    regex: List[str] = field(default_factory=list)
    op: List[str] = field(default_factory=list)
    lines: bool = False

    def extend(self, regex: List[str], op: List[str], lines: bool = False) -> "Recipe":
        """Returns a new recipe with CLI values appended after the recipe's own."""
        return Recipe(regex=self.regex + list(regex), op=self.op + list(op), lines=self.lines or lines)

    def build(self) -> Tuple[List[Pattern], List[Operator]]:
        patterns = PatternCompiler().compile_all(self.regex)
        operators = OperatorParser().parse_all(self.op)
        return patterns, operators


def _string_list(path: str, key: str, value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise RecipeError(path, f"'{key}' must be a string or a list of strings")


def load_recipe(path: str) -> Recipe:
    yaml = YAML(typ='safe', pure=True)
    try:
        data = yaml.load(Path(path).read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeError(path, f"unable to read: {e}") from e
    except YAMLError as e:
        raise RecipeError(path, f"malformed YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RecipeError(path, "top level must be a mapping")

    unknown = set(data) - KNOWN_KEYS
    if unknown:
        raise RecipeError(path, f"unknown key(s): {', '.join(sorted(map(str, unknown)))}")

    lines = data.get("lines", False)
    if not isinstance(lines, bool):
        raise RecipeError(path, "'lines' must be true or false")

    recipe = Recipe(
        regex=_string_list(path, "regex", data.get("regex")),
        op=_string_list(path, "op", data.get("op")),
        lines=lines,
    )
    logger.debug(f"Loaded recipe {path}: {len(recipe.regex)} pattern(s), {len(recipe.op)} operator(s)")
    return recipe
