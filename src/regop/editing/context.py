#!/usr/bin/env python3
"""
REGOP EDIT CONTEXT
------------------
The working record of a single document transform. Created by the
EditPipeline, filled in by the resolver, planner and applier in turn, and
discarded once the transform returns.

Author: Regop Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from typing import List, Optional
from regop.core.models import CaptureTable, PendingEdit


@dataclass
class EditContext:
    """
    State of one document transform.
    """
    document: str                                          # Input text, never mutated
    captures: CaptureTable = field(default_factory=dict)  # Groups read as values
    edits: List[PendingEdit] = field(default_factory=list) # Planned replacements
    result: Optional[str] = None                           # New text, None when unchanged

    @property
    def changed(self) -> bool:
        return self.result is not None
