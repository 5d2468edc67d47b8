#!/usr/bin/env python3
"""
REGOP ENGINE - The High Orchestrator
------------------------------------
Entry points of the library:

  * `transform()`  - the pure core contract: patterns + operators + text
                     in, new text (or None when nothing changed) out.
  * `RegopEngine`  - drives `transform()` over files and stdin, with
                     atomic persistence for write mode.

Author: Regop Team
Date: 2026-10-19
"""

import os
import sys
import shutil
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional, TextIO

from regop.core.errors import InputError
from regop.core.models import Operator, Pattern
from regop.editing.pipeline import EditPipeline

logger = logging.getLogger("regop.engine")

STDIN_MARKER = "-"


def transform(line_mode: bool, patterns: List[Pattern], operators: List[Operator],
              document: str) -> Optional[str]:
    """
    Applies every operator to `document` as one consistent rewrite.

    Returns the new text when at least one edit was applied, None otherwise.
    With `line_mode`, each line is transformed independently.
    Raises a RegopError subclass on any failure; nothing is partially applied.
    """
    return EditPipeline(patterns, operators).transform_document(document, line_mode)


class RegopEngine:
    """
    Applies one run configuration to files on disk or to stdin.
    """

    def __init__(self, patterns: List[Pattern], operators: List[Operator],
                 lines: bool = False, stdin: Optional[TextIO] = None):
        self.pipeline = EditPipeline(patterns, operators)
        self.lines = lines
        self.stdin = stdin if stdin is not None else sys.stdin

    def process_text(self, text: str) -> Optional[str]:
        return self.pipeline.transform_document(text, self.lines)

    def process_file(self, file: str, write: bool = False) -> Dict[str, Any]:
        """
        Transforms a single file (or stdin for `-`).

        In write mode a changed file is replaced atomically; for stdin the new
        content is only returned, the caller decides where it goes.
        """
        # Phase 1: Read
        original = self._read(file)

        # Phase 2: Transform
        content = self.process_text(original)
        is_modified = content is not None

        # Phase 3: Persist
        written = False
        if write and is_modified and file != STDIN_MARKER:
            self._atomic_write(Path(file), content)
            written = True

        status = self._derive_status(is_modified, write, written)
        logger.debug(f"{file}: {status}")

        return {
            "file_path": file,
            "status": status,
            "original": original,
            "content": content,
            "written": written,
        }

    def iter_file_names(self) -> List[str]:
        """File names piped on stdin, one per line."""
        if self.stdin.isatty():
            raise InputError("supply filename or pipe a list of files to stdin")
        return [name for name in (line.rstrip("\r\n") for line in self.stdin) if name]

    def _read(self, file: str) -> str:
        if file == STDIN_MARKER:
            return self.stdin.read()
        try:
            with open(file, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"unable to read file '{file}': {e}", path=file) from e

    def _derive_status(self, modified: bool, write: bool, written: bool) -> str:
        if not modified: return "UNCHANGED"
        if written: return "WRITTEN"
        return "STDOUT" if write else "PREVIEW"

    def _atomic_write(self, target_path: Path, content: str):
        temp_file = target_path.with_name(target_path.name + '.regop.tmp')
        try:
            # newline='' keeps the line endings exactly as transformed
            with open(temp_file, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
            shutil.copymode(target_path, temp_file)
            os.replace(temp_file, target_path)
        except OSError as e:
            if temp_file.exists(): temp_file.unlink()
            raise InputError(f"unable to write file '{target_path}': {e}", path=str(target_path)) from e
