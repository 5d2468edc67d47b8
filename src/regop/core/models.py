#!/usr/bin/env python3
"""
REGOP CORE MODELS
-----------------
Defines the fundamental data structures used across the Regop engine.
Patterns and Operators form the run configuration; MatchSpans and
PendingEdits only live for the duration of one document transform.

Author: Regop Team
Date: 2026-10-19
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List, Union


@dataclass(frozen=True)
class Pattern:
    """
    A compiled regular expression plus the named groups it declares.

    Unnamed groups are not part of `names`; they can never be targeted.
    """
    source: str                 # The pattern as the user wrote it
    regex: re.Pattern           # The compiled matcher
    names: FrozenSet[str]       # Named capture groups only

    def declares(self, name: str) -> bool:
        return name in self.names


class OperationKind(Enum):
    """Closed set of transformations an Operator can perform."""
    INCREMENT = "inc"
    DECREMENT = "dec"
    MULTIPLY = "mul"
    DIVIDE = "div"
    REPLACE = "rep"
    DELETE = "del"
    SWAP = "swap"
    APPEND = "append"
    PREPEND = "prepend"
    UPPERCASE = "upper"
    LOWERCASE = "lower"


@dataclass(frozen=True)
class IntegerParam:
    value: int

    def render(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TextParam:
    value: str

    def render(self) -> str:
        return self.value


@dataclass(frozen=True)
class GroupReference:
    """Points at another capture group; resolved per match at plan time."""
    name: str

    def render(self) -> str:
        return f"<{self.name}>"


Parameter = Union[IntegerParam, TextParam, GroupReference]

# Placeholder for operations that take no user parameter (del/upper/lower)
NO_PARAMETER = IntegerParam(0)


@dataclass(frozen=True)
class Operator:
    """
    One parsed instruction: `<target>:kind[:parameter]`.
    """
    target: str                 # Name of the capture group to edit
    kind: OperationKind         # What to do with each match
    parameter: Parameter        # Literal or group reference
    source: str = ""            # Original operator text, kept for diagnostics


@dataclass(frozen=True)
class MatchSpan:
    """
    One match of one group: half-open `[start, end)` over the document.
    """
    start: int
    end: int
    text: str


@dataclass(frozen=True)
class PendingEdit:
    """A computed replacement for one span, not yet committed."""
    start: int
    end: int
    replacement: str


# Group name -> every recorded span for that group, in scan order
CaptureTable = Dict[str, List[MatchSpan]]
