#!/usr/bin/env python3
"""
REGOP EDIT PIPELINE
-------------------
Runs one document through the three per-document phases in a fixed order:
capture resolution, edit planning and edit application.

The pipeline holds only the immutable run configuration (patterns and
operators), so a single instance can transform any number of documents,
including from several threads at once.

Author: Regop Team
Date: 2026-10-19
"""

import logging
from typing import List, Optional

from regop.core.models import Operator, Pattern
from regop.editing.applier import EditApplier
from regop.editing.context import EditContext
from regop.editing.planner import EditPlanner
from regop.editing.resolver import CaptureResolver

logger = logging.getLogger("regop.pipeline")


class EditPipeline:
    """
    The Orchestrator: all edits for a document commit together or not at all.
    """

    def __init__(self, patterns: List[Pattern], operators: List[Operator]):
        self.patterns = list(patterns)
        self.operators = list(operators)
        self.resolver = CaptureResolver()
        self.planner = EditPlanner()
        self.applier = EditApplier()

    def run(self, document: str) -> EditContext:
        context = EditContext(document=document)

        # --- PHASE 1: CAPTURE RESOLUTION ---
        # Fails early if any group used as a value was never captured.
        context.captures = self.resolver.resolve(self.patterns, self.operators, document)

        # --- PHASE 2: EDIT PLANNING ---
        context.edits = self.planner.plan(self.patterns, self.operators, document, context.captures)

        # --- PHASE 3: APPLICATION ---
        # Overlap validation happens before the first character is touched.
        context.result = self.applier.apply(document, context.edits)

        logger.debug(f"Planned {len(context.edits)} edit(s); changed={context.changed}")
        return context

    def transform(self, document: str) -> Optional[str]:
        return self.run(document).result

    def transform_document(self, document: str, line_mode: bool = False) -> Optional[str]:
        """Whole-document or per-line transform, per `line_mode`."""
        if line_mode:
            return self.transform_lines(document)
        return self.transform(document)

    def transform_lines(self, document: str) -> Optional[str]:
        """
        Transforms each newline-delimited line as its own document and writes
        results back by line index, so repeated lines are each handled in place.
        A trailing '\\r' stays outside the line handed to the patterns.
        """
        lines = document.split("\n")
        last = len(lines) - 1
        changed = False

        for idx, line in enumerate(lines):
            # The empty piece after a final newline is not a line
            if idx == last and line == "":
                continue

            body, ending = (line[:-1], "\r") if line.endswith("\r") else (line, "")
            new_body = self.transform(body)
            if new_body is not None:
                lines[idx] = new_body + ending
                changed = True

        return "\n".join(lines) if changed else None
