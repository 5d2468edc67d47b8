#!/usr/bin/env python3
"""
REGOP OPERATOR PARSER
---------------------
Parses operator strings of the form `<target>:operation[:parameter]` into
structured Operator instructions.

The parameter ends at the next colon boundary, so parameters containing a
literal ':' are rejected as malformed operators.

Author: Regop Team
Date: 2026-10-19
"""

import re
from typing import Iterable, List, Optional

from regop.core.errors import InvalidOperatorSyntax, MissingParameter, UnknownOperator
from regop.core.models import (
    NO_PARAMETER,
    GroupReference,
    IntegerParam,
    OperationKind,
    Operator,
    Parameter,
    TextParam,
)

# Group 1: target, Group 2: operation keyword, Group 3: optional parameter
OPERATOR_PATTERN = re.compile(r'<([^>]+)>:([^:]+)(?::([^:]*))?')
REFERENCE_PATTERN = re.compile(r'<([^>]+)>')
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')

INT_MIN = -(1 << 63)
INT_MAX = (1 << 63) - 1

# Operations whose parameter falls back to a default when omitted
DEFAULTS = {
    OperationKind.INCREMENT: IntegerParam(1),
    OperationKind.DECREMENT: IntegerParam(1),
}

# Operations that ignore any user parameter
PARAMETERLESS = {OperationKind.DELETE, OperationKind.UPPERCASE, OperationKind.LOWERCASE}


def parse_int(text: str) -> Optional[int]:
    """Strict signed 64-bit decimal parse. Returns None when `text` is not a numeral."""
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_parameter(raw: str) -> Parameter:
    """
    Integer if it parses as one, GroupReference if it has the `<name>`
    shape, Text otherwise. Never fails.
    """
    number = parse_int(raw)
    if number is not None:
        return IntegerParam(number)

    ref = REFERENCE_PATTERN.fullmatch(raw)
    if ref:
        return GroupReference(ref.group(1))

    return TextParam(raw)


class OperatorParser:
    """Turns operator strings into Operators."""

    KEYWORDS = {kind.value: kind for kind in OperationKind}

    def parse(self, text: str) -> Operator:
        match = OPERATOR_PATTERN.fullmatch(text)
        if not match:
            raise InvalidOperatorSyntax(text)

        target, keyword, raw_param = match.groups()

        kind = self.KEYWORDS.get(keyword)
        if kind is None:
            raise UnknownOperator(keyword, text)

        if kind in PARAMETERLESS:
            return Operator(target=target, kind=kind, parameter=NO_PARAMETER, source=text)

        # An empty trailing parameter ("<a>:rep:") counts as omitted
        if raw_param:
            parameter = parse_parameter(raw_param)
        elif kind in DEFAULTS:
            parameter = DEFAULTS[kind]
        else:
            raise MissingParameter(keyword, text)

        return Operator(target=target, kind=kind, parameter=parameter, source=text)

    def parse_all(self, texts: Iterable[str]) -> List[Operator]:
        return [self.parse(t) for t in texts]
