#!/usr/bin/env python3
"""
REGOP EDIT PLANNER
------------------
Converts operators into PendingEdits for one document.

Two strategies, picked per operator:
  * Swap    - pairs every match of two groups positionally (document order)
              and exchanges their texts.
  * Regular - computes a new text for every match of the target group,
              resolving group-reference parameters to the nearest capture.

Operators whose target group is never declared or never matches contribute
no edits; they are not errors.

Integer arithmetic is 64-bit signed with wraparound.

Author: Regop Team
Date: 2026-10-19
"""

import logging
from typing import List, Union

from regop.core.errors import (
    DivisionByZero,
    GroupReferenceNotFound,
    InvalidNumber,
    SwapArityMismatch,
)
from regop.core.models import (
    CaptureTable,
    GroupReference,
    IntegerParam,
    MatchSpan,
    OperationKind,
    Operator,
    Pattern,
    PendingEdit,
    TextParam,
)
from regop.editing.applier import distance
from regop.editing.parser import parse_int

logger = logging.getLogger("regop.planner")

Resolved = Union[IntegerParam, TextParam]


def wrap(value: int) -> int:
    """Folds an arbitrary int into the signed 64-bit range."""
    value &= (1 << 64) - 1
    return value - (1 << 64) if value >= (1 << 63) else value


def truncating_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return wrap(quotient)


def collect_spans(patterns: List[Pattern], document: str, name: str) -> List[MatchSpan]:
    """Every match of group `name` across all patterns, in document order."""
    spans = []
    for pattern in patterns:
        if not pattern.declares(name):
            continue
        for match in pattern.regex.finditer(document):
            if match.start(name) != -1:
                spans.append(MatchSpan(match.start(name), match.end(name), match.group(name)))
    spans.sort(key=lambda s: s.start)
    return spans


class EditPlanner:

    def plan(self, patterns: List[Pattern], operators: List[Operator],
             document: str, table: CaptureTable) -> List[PendingEdit]:
        edits: List[PendingEdit] = []
        for op in operators:
            if op.kind is OperationKind.SWAP:
                produced = self.swap_edits(op, patterns, document)
            else:
                produced = self.regular_edits(op, patterns, document, table)

            if not produced:
                logger.debug(f"Operator {op.source or op.target!r} produced no edits")
            edits.extend(produced)
        return edits

    def swap_edits(self, op: Operator, patterns: List[Pattern], document: str) -> List[PendingEdit]:
        param = op.parameter
        other = param.name if isinstance(param, GroupReference) else param.render()

        sources = collect_spans(patterns, document, op.target)
        targets = collect_spans(patterns, document, other)

        if len(sources) != len(targets):
            raise SwapArityMismatch(op.target, other, len(sources), len(targets))

        # Both sides are built from the pre-edit text, so this is a true exchange
        edits = []
        for source, target in zip(sources, targets):
            edits.append(PendingEdit(source.start, source.end, target.text))
            edits.append(PendingEdit(target.start, target.end, source.text))
        return edits

    def regular_edits(self, op: Operator, patterns: List[Pattern],
                      document: str, table: CaptureTable) -> List[PendingEdit]:
        edits = []
        for pattern in patterns:
            if not pattern.declares(op.target):
                continue
            for match in pattern.regex.finditer(document):
                if match.start(op.target) == -1:
                    continue
                span = MatchSpan(match.start(op.target), match.end(op.target), match.group(op.target))
                value = self.resolve_parameter(op, span, table)
                edits.append(PendingEdit(span.start, span.end, self.compute(op, span.text, value)))
        return edits

    def resolve_parameter(self, op: Operator, span: MatchSpan, table: CaptureTable) -> Resolved:
        """
        Literal parameters pass through. A GroupReference becomes the text of
        the closest recorded capture; an overlapping capture counts as closest,
        and ties go to the earliest recorded.
        """
        param = op.parameter
        if not isinstance(param, GroupReference):
            return param

        candidates = table.get(param.name)
        if not candidates:
            raise GroupReferenceNotFound(param.name)

        def closeness(item):
            index, cand = item
            gap = distance(span.start, span.end, cand.start, cand.end)
            return (-1 if gap is None else gap, index)

        _, nearest = min(enumerate(candidates), key=closeness)
        return TextParam(nearest.text)

    def compute(self, op: Operator, old: str, value: Resolved) -> str:
        kind = op.kind

        if kind is OperationKind.INCREMENT:
            return str(wrap(self._number(old) + self._operand(value)))
        if kind is OperationKind.DECREMENT:
            return str(wrap(self._number(old) - self._operand(value)))
        if kind is OperationKind.MULTIPLY:
            return str(wrap(self._number(old) * self._operand(value)))
        if kind is OperationKind.DIVIDE:
            dividend = self._number(old)
            divisor = self._operand(value)
            if divisor == 0:
                raise DivisionByZero(op.source)
            return str(truncating_div(dividend, divisor))
        if kind is OperationKind.REPLACE:
            return value.render()
        if kind is OperationKind.DELETE:
            return ""
        if kind is OperationKind.APPEND:
            return old + value.render()
        if kind is OperationKind.PREPEND:
            return value.render() + old
        if kind is OperationKind.UPPERCASE:
            return old.upper()
        if kind is OperationKind.LOWERCASE:
            return old.lower()

        raise ValueError(f"Operation {kind} cannot be planned per match")

    def _number(self, text: str) -> int:
        number = parse_int(text)
        if number is None:
            raise InvalidNumber(text)
        return number

    def _operand(self, value: Resolved) -> int:
        if isinstance(value, IntegerParam):
            return value.value
        return self._number(value.value)
