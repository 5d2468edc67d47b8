#!/usr/bin/env python3
"""
REGOP PATTERN COMPILER
----------------------
Turns a user-supplied regex source into a reusable Pattern. Accepts the
`(?<name>...)` group notation in addition to Python's `(?P<name>...)`.

Author: Regop Team
Date: 2026-10-19
"""

import re
import logging
from typing import Iterable, List

from regop.core.errors import InvalidPattern
from regop.core.models import Pattern

logger = logging.getLogger("regop.compiler")


class PatternCompiler:
    """
    Compiles named-capture patterns. Stateless; one instance can be shared
    across a whole run.
    """

    def normalize(self, source: str) -> str:
        """
        Rewrites `(?<name>` openers to `(?P<name>`.
        Escapes, character classes and lookbehinds (`(?<=`, `(?<!`) pass through.
        """
        out = []
        i = 0
        in_class = False
        length = len(source)

        while i < length:
            char = source[i]

            if char == '\\':
                out.append(source[i:i + 2])
                i += 2
                continue

            if in_class:
                if char == ']':
                    in_class = False
                out.append(char)
                i += 1
                continue

            if char == '[':
                in_class = True
                out.append(char)
                i += 1
                # A leading ']' (or '^]') is a literal inside the class
                if source.startswith('^]', i):
                    out.append('^]')
                    i += 2
                elif source.startswith(']', i):
                    out.append(']')
                    i += 1
                continue

            if source.startswith('(?<', i) and i + 3 < length and source[i + 3] not in '=!':
                out.append('(?P<')
                i += 3
                continue

            out.append(char)
            i += 1

        return ''.join(out)

    def compile(self, source: str) -> Pattern:
        try:
            regex = re.compile(self.normalize(source))
        except re.error as e:
            raise InvalidPattern(source, str(e)) from e

        names = frozenset(regex.groupindex)
        logger.debug(f"Compiled pattern {source!r} with groups {sorted(names)}")
        return Pattern(source=source, regex=regex, names=names)

    def compile_all(self, sources: Iterable[str]) -> List[Pattern]:
        return [self.compile(s) for s in sources]
