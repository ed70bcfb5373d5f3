from __future__ import annotations

from collections import deque
from typing import Deque, List

COMMANDS = ("UP", "DOWN", "LEFT", "RIGHT", "SELECT", "START")


class InputQueue:
    """Command names waiting for the main loop.

    GPIO callbacks push from gpiozero's threads; ``deque.append`` and
    ``popleft`` are atomic, so producers never need a lock.
    """

    def __init__(self) -> None:
        self._q: Deque[str] = deque()

    def push(self, name: str) -> None:
        if name not in COMMANDS:
            raise ValueError(f"unknown command {name!r}")
        self._q.append(name)

    def pop_all(self) -> list[str]:
        out: List[str] = []
        while self._q:
            out.append(self._q.popleft())
        return out

    def __len__(self) -> int:
        return len(self._q)


__all__ = ["COMMANDS", "InputQueue"]
