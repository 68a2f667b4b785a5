"""Hidden-from-docs state, one entry per attribute-bearing scope."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Sequence

from .errors import SuppressionStackError
from .model import Attribute

HiddenPredicate = Callable[[Sequence[Attribute]], bool]


def attributes_mark_hidden(attributes: Sequence[Attribute]) -> bool:
    """True when the attribute list carries ``#[doc(hidden)]``."""
    return any(attr.name == "doc" and "hidden" in attr.items for attr in attributes)


class SuppressionStack:
    def __init__(self, is_hidden: HiddenPredicate = attributes_mark_hidden) -> None:
        self._is_hidden = is_hidden
        self._stack: list[bool] = [False]
        self.enter_count = 0
        self.exit_count = 0

    def current(self) -> bool:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack) - 1

    def enter(self, attributes: Sequence[Attribute]) -> None:
        self._stack.append(self.current() or bool(self._is_hidden(attributes)))
        self.enter_count += 1

    def exit(self) -> None:
        if len(self._stack) == 1:
            raise SuppressionStackError("empty suppression stack: exit without matching enter")
        self._stack.pop()
        self.exit_count += 1

    @contextmanager
    def scope(self, attributes: Sequence[Attribute]) -> Iterator[bool]:
        self.enter(attributes)
        try:
            yield self.current()
        finally:
            self.exit()
