from __future__ import annotations

from typing import Iterator, List, Type, TypeVar

from .common import BasicControlError, Frame

F = TypeVar("F", bound=Frame)


class ControlStack:
    """
    The single LIFO stack shared by GOSUB, FOR and DO.

    Readers name the frame class they expect; any other frame on top means
    the program's nesting is broken and `error` is raised.
    """

    def __init__(self):
        self._frames: List[Frame] = []

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return reversed(self._frames)

    def __repr__(self) -> str:
        return f"<ControlStack {self._frames!r}>"

    def clear(self) -> None:
        self._frames.clear()

    def push(self, frame: Frame) -> None:
        self._frames.append(frame)

    def top(self, expected: Type[F], error: str) -> F:
        if not self._frames:
            raise BasicControlError(error)
        frame = self._frames[-1]
        if not isinstance(frame, expected):
            raise BasicControlError(f"{error} (found {frame.kind})")
        return frame

    def pop(self, expected: Type[F], error: str) -> F:
        frame = self.top(expected, error)
        self._frames.pop()
        return frame
