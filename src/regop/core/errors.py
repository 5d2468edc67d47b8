#!/usr/bin/env python3
"""
REGOP ERRORS
------------
Typed failures for every stage of a transform. Each error is terminal for
the document being processed: nothing is retried and nothing is written.

Author: Regop Team
Date: 2026-10-19
"""

from typing import Optional


class RegopError(Exception):
    """Base class for everything the engine raises on purpose."""


class InvalidPattern(RegopError):
    def __init__(self, source: str, reason: str):
        super().__init__(f"'{source}' not a valid regex: {reason}")
        self.source = source
        self.reason = reason


class InvalidOperatorSyntax(RegopError):
    def __init__(self, operator: str):
        super().__init__(f"'{operator}' not a valid operator format")
        self.operator = operator


class UnknownOperator(RegopError):
    def __init__(self, keyword: str, operator: str = ""):
        super().__init__(f"'{keyword}' is not a valid operator")
        self.keyword = keyword
        self.operator = operator


class MissingParameter(RegopError):
    def __init__(self, keyword: str, operator: str = ""):
        super().__init__(f"parameter required in '{keyword}' operator")
        self.keyword = keyword
        self.operator = operator


class UnresolvedGroupReference(RegopError):
    """A group is used as a value but no pattern ever captured it."""

    def __init__(self, name: str):
        super().__init__(f"'<{name}>' used as value but not found")
        self.name = name


class GroupReferenceNotFound(RegopError):
    def __init__(self, name: str):
        super().__init__(f"no capture found named '{name}'")
        self.name = name


class SwapArityMismatch(RegopError):
    def __init__(self, source: str, target: str, source_count: int, target_count: int):
        super().__init__(
            f"Cannot swap '{source}' and '{target}': different number of matches "
            f"({source_count} vs {target_count})"
        )
        self.source = source
        self.target = target
        self.source_count = source_count
        self.target_count = target_count


class InvalidNumber(RegopError):
    def __init__(self, text: str):
        super().__init__(f"cannot parse '{text}' as int")
        self.text = text


class DivisionByZero(RegopError):
    def __init__(self, operator: str = ""):
        super().__init__("division by zero")
        self.operator = operator


class OverlappingEdits(RegopError):
    def __init__(self, first: tuple, second: tuple):
        super().__init__(
            f"edits overlap each other: [{first[0]}, {first[1]}) and [{second[0]}, {second[1]})"
        )
        self.first = first
        self.second = second


class RecipeError(RegopError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"invalid recipe '{path}': {reason}")
        self.path = path
        self.reason = reason


class InputError(RegopError):
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
