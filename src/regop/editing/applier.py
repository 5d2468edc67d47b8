#!/usr/bin/env python3
"""
REGOP EDIT APPLIER
------------------
Commits a list of PendingEdits to a document as a single rewrite, after
proving that no two edits touch a shared character.

Author: Regop Team
Date: 2026-10-19
"""

import logging
from typing import List, Optional

from regop.core.errors import OverlappingEdits
from regop.core.models import PendingEdit

logger = logging.getLogger("regop.applier")


def distance(start_a: int, end_a: int, start_b: int, end_b: int) -> Optional[int]:
    """
    Gap between two half-open intervals, or None when they overlap.
    Adjacent intervals (end_a == start_b) are 0 apart.
    """
    if end_a <= start_b:
        return start_b - end_a
    if end_b <= start_a:
        return start_a - end_b
    return None


class EditApplier:

    def validate(self, edits: List[PendingEdit]) -> List[PendingEdit]:
        """Returns the edits in start order, raising if any neighbours overlap."""
        ordered = sorted(edits, key=lambda e: (e.start, e.end))
        for first, second in zip(ordered, ordered[1:]):
            if distance(first.start, first.end, second.start, second.end) is None:
                raise OverlappingEdits((first.start, first.end), (second.start, second.end))
        return ordered

    def apply(self, document: str, edits: List[PendingEdit]) -> Optional[str]:
        """
        Rewrites `document`. Returns None when there is nothing to apply.
        Edits are committed from the highest offset down so lower offsets stay valid.
        """
        ordered = self.validate(edits)
        if not ordered:
            return None

        for ed in reversed(ordered):
            document = document[:ed.start] + ed.replacement + document[ed.end:]

        logger.debug(f"Applied {len(ordered)} edit(s)")
        return document
