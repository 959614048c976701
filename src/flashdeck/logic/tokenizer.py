"""Split an argument tail into a preamble and flagged values.

A flag only counts when it follows whitespace, so ``q/what is a/b`` inside a
value stays intact unless the ``a/`` is preceded by a space::

    >>> tokens = tokenize(" 1 q/2+2 t/math t/easy", "q/", "t/")
    >>> tokens.preamble, tokens.get_value("q/"), tokens.get_all_values("t/")
    ('1', '2+2', ['math', 'easy'])
"""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from flashdeck.errors import ParseError

MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "


@dataclass
class ArgumentMultimap:
    preamble: str = ""
    values: Dict[str, List[str]] = field(default_factory=lambda: defaultdict(list))

    def get_value(self, prefix: str) -> Optional[str]:
        """Return the last value given for ``prefix``, or ``None`` when absent."""
        found = self.values.get(prefix)
        return found[-1] if found else None

    def get_all_values(self, prefix: str) -> List[str]:
        return list(self.values.get(prefix, []))

    def has(self, prefix: str) -> bool:
        return bool(self.values.get(prefix))

    def verify_no_duplicate_prefixes_for(self, *prefixes: str, usage: Optional[str] = None) -> None:
        duplicated = [prefix for prefix in prefixes if len(self.values.get(prefix, [])) > 1]
        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS + " ".join(duplicated), usage=usage)


def _find_positions(args: str, prefixes: Tuple[str, ...]) -> List[Tuple[int, str]]:
    positions: List[Tuple[int, str]] = []
    for prefix in prefixes:
        pattern = re.compile(r"(?<=\s)" + re.escape(prefix))
        positions.extend((match.start(), prefix) for match in pattern.finditer(args))
    positions.sort()
    return positions


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    positions = _find_positions(args, prefixes)
    multimap = ArgumentMultimap()
    if not positions:
        multimap.preamble = args.strip()
        return multimap

    multimap.preamble = args[: positions[0][0]].strip()
    for current, following in zip(positions, positions[1:] + [(len(args), "")]):
        start, prefix = current
        value = args[start + len(prefix): following[0]].strip()
        multimap.values[prefix].append(value)
    return multimap
