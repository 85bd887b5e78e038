from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

from .common import BasicControlError

logger = logging.getLogger(__name__)


class Program:
    """
    Stored program text keyed by line number.

    Lines are kept unparsed; iteration and listings are in ascending line
    order regardless of the order lines were stored in.
    """

    def __init__(self):
        self._lines: Dict[int, str] = {}

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, number: object) -> bool:
        return number in self._lines

    def __getitem__(self, number: int) -> str:
        return self._lines[number]

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        for number in self.line_numbers():
            yield number, self._lines[number]

    def store(self, number: int, text: str) -> None:
        self._lines[number] = text.strip()

    def delete(self, number: int) -> None:
        if number not in self._lines:
            raise BasicControlError(f"Line not found: {number}")
        del self._lines[number]

    def clear(self) -> None:
        self._lines.clear()

    def line_numbers(self) -> List[int]:
        return sorted(self._lines)

    def listing(self) -> Iterator[str]:
        for number, text in self:
            yield f"{number}\t{text}"

    def save(self, path: str | Path) -> None:
        path = Path(path)
        with path.open("w", encoding="utf-8") as fh:
            for line in self.listing():
                fh.write(line + "\n")
        logger.info("saved %d lines to %s", len(self), path)
