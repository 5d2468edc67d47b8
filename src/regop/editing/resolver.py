#!/usr/bin/env python3
"""
REGOP CAPTURE RESOLVER
----------------------
Materializes every group that operators read as a value (e.g. the `<b>` in
`<a>:inc:<b>`) before any edit is planned.

Two phases:
  1. `referenced_names` decides which groups are needed.
  2. `build_table` scans the document for exactly those groups.

Whenever a pattern declaring a referenced group matches, all of that
pattern's named groups present in the match are recorded together, so the
planner can later pick the value from the same "record" as its target.

Author: Regop Team
Date: 2026-10-19
"""

import logging
from typing import Iterable, List, Set

from regop.core.errors import UnresolvedGroupReference
from regop.core.models import CaptureTable, GroupReference, MatchSpan, OperationKind, Operator, Pattern

logger = logging.getLogger("regop.resolver")


class CaptureResolver:

    def referenced_names(self, operators: Iterable[Operator]) -> Set[str]:
        """Group names used as values by non-swap operators."""
        return {
            op.parameter.name
            for op in operators
            if isinstance(op.parameter, GroupReference) and op.kind is not OperationKind.SWAP
        }

    def build_table(self, patterns: List[Pattern], document: str, names: Set[str]) -> CaptureTable:
        table: CaptureTable = {}
        if not names:
            return table

        for pattern in patterns:
            if not pattern.names & names:
                continue

            # Sorted for a deterministic recording order within each match
            declared = sorted(pattern.names)
            for match in pattern.regex.finditer(document):
                for name in declared:
                    if match.start(name) == -1:
                        continue  # Group did not participate in this match
                    table.setdefault(name, []).append(
                        MatchSpan(match.start(name), match.end(name), match.group(name))
                    )

        for name in sorted(names):
            if not table.get(name):
                raise UnresolvedGroupReference(name)

        counts = {k: len(v) for k, v in table.items()}
        logger.debug(f"Capture table built for {sorted(names)}: {counts}")
        return table

    def resolve(self, patterns: List[Pattern], operators: List[Operator], document: str) -> CaptureTable:
        return self.build_table(patterns, document, self.referenced_names(operators))
