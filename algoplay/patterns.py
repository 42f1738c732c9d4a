"""Observer and interceptor-chain design patterns."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional, TextIO

Process = Callable[[int], Any]
Intercept = Callable[[int, Process], Any]


class Observer(ABC):
    """Something told about changes to a subject."""

    @abstractmethod
    def notify(self, data: str) -> None:
        """Receive the new state of the subject."""


class ChangeObserver(Observer):
    """Writes each change of name to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def notify(self, data: str) -> None:
        print("change name :" + data, file=self.stream or sys.stdout)


class Subject:
    """A named subject that notifies its observers when renamed."""

    def __init__(
        self, name: str, observers: Optional[Iterable[Observer]] = None
    ) -> None:
        self.name = name
        self.observers: list[Observer] = (
            [ChangeObserver()] if observers is None else list(observers)
        )

    def update(self, name: str) -> None:
        """Set the name and notify every observer in order."""
        self.name = name
        for observer in self.observers:
            observer.notify(name)


class InterceptError(Exception):
    """Raised by an interceptor that rejects a value."""


def process_a(n: int, proceed: Process) -> Any:
    """Reject 1; pass anything else on."""
    if n == 1:
        raise InterceptError("1")
    return proceed(n)


def process_b(n: int, proceed: Process) -> Any:
    """Reject 2; pass anything else on."""
    if n == 2:
        raise InterceptError("2")
    return proceed(n)


def process_c(n: int, proceed: Process) -> Any:
    """Reject 3; pass anything else on."""
    if n == 3:
        raise InterceptError("3")
    return proceed(n)


def intercept_chain(*intercepts: Intercept) -> Intercept:
    """Combine interceptors into one that runs them in the given order."""

    def bind(intercept: Intercept, following: Process) -> Process:
        return lambda value: intercept(value, following)

    def chain(n: int, proceed: Process) -> Any:
        handler = proceed
        for intercept in reversed(intercepts):
            handler = bind(intercept, handler)
        return handler(n)

    return chain