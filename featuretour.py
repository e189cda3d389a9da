#!/usr/bin/env python3
"""
Featuretour - a guided tour of everyday language features.

Walks a toy Person value object through read-only fields, computed members,
string interpolation, safe navigation, null coalescing and exception filters,
printing a fixed transcript.

Architecture: Functional Core, Imperative Shell
- Data: immutable dataclasses
- Computations: pure functions (no I/O, no printing)
- Renderers: pure functions (data → str)
- Actions: print at the edge only
"""

from __future__ import annotations

import statistics
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Iterator, Sequence, TypeVar


T = TypeVar("T")
U = TypeVar("U")


# =============================================================================
# CONSTANTS
# =============================================================================


PHRASE = "the quick brown fox jumps over the lazy dog"

DEFAULT_FIRST = "Jose"
DEFAULT_MIDDLE = "N/A"
DEFAULT_LAST = "Fraga"

HANDLED_LINE = "Exception must have been handled"


# =============================================================================
# DOMAIN TYPES (Data)
# =============================================================================


@dataclass(frozen=True)
class Person:
    """
    A name, fixed at construction.

    Fields are read-only: type checkers reject assignment, and the runtime
    raises FrozenInstanceError. Uppercasing is a query, never a rewrite.
    """

    first_name: str
    middle_name: str
    last_name: str

    @classmethod
    def without_middle(cls, first: str, last: str) -> Person:
        return cls(first, "", last)

    def to_display_string(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_all_caps_string(self) -> str:
        return self.to_display_string().upper()

    def __str__(self) -> str:
        return self.to_display_string()


class ErrorKind(Enum):
    """Kind of failure the tour knows how to name."""

    ABSENT_VALUE = auto()
    OTHER = auto()


class ExceptionPolicy(Enum):
    """What happens when the exception filter declines a failure."""

    PROPAGATE = auto()  # filter said False: re-raise
    SWALLOW = auto()  # log, then carry on regardless


@dataclass(frozen=True)
class Failure:
    """A failure that escaped the tour (pure data)."""

    kind: ErrorKind
    type_name: str
    message: str


@dataclass(frozen=True)
class TourOutcome:
    """Everything the tour printed, plus how it ended (pure data)."""

    lines: tuple[str, ...]
    failure: Failure | None  # None if the tour ran to completion

    @property
    def exit_code(self) -> int:
        return 0 if self.failure is None else 1


# =============================================================================
# PURE FUNCTIONS (Computations) - No I/O, no side effects, no printing
# =============================================================================


def word_lengths(phrase: str) -> tuple[int, ...]:
    """
    Length of every space-separated word.

    Splits on single spaces only, so runs of spaces yield zero-length words.

    Pure: str -> tuple[int, ...]
    """
    return tuple(len(word) for word in phrase.split(" "))


def average(values: Sequence[int]) -> float:
    """Arithmetic mean. Raises StatisticsError on an empty sequence."""
    return statistics.fmean(values)


def bind(value: T | None, fn: Callable[[T], U | None]) -> U | None:
    """Apply fn if value is present, else stay absent. Pure."""
    if value is None:
        return None
    return fn(value)


def chain(value: Any, *steps: Callable[[Any], Any]) -> Any:
    """
    Run value through each step, short-circuiting at the first None.

    chain(s, list, iter, move_next) reads like s?.a()?.b()?.c().

    Pure: (value, *steps) -> value | None
    """
    result = value
    for step in steps:
        result = bind(result, step)
        if result is None:
            break
    return result


def coalesce(value: T | None, default: T) -> T:
    """Return value unless it is None. Falsy values are kept."""
    return default if value is None else value


def move_next(cursor: Iterator[Any]) -> bool:
    """Advance cursor; True if there was another element."""
    sentinel = object()
    return next(cursor, sentinel) is not sentinel


def first_char(text: str) -> str:
    return text[0]


def read_length(text: str | None) -> int:
    """Length of text. Fails with TypeError when text is None."""
    return len(text)  # type: ignore[arg-type]


# Exact runtime type -> kind; subclasses are not matched.
_ERROR_KINDS: dict[type[BaseException], ErrorKind] = {
    TypeError: ErrorKind.ABSENT_VALUE,
    AttributeError: ErrorKind.ABSENT_VALUE,
}


def classify(exc: BaseException) -> ErrorKind:
    """Pure: BaseException -> ErrorKind."""
    return _ERROR_KINDS.get(type(exc), ErrorKind.OTHER)


def qualified_type_name(exc: BaseException) -> str:
    """builtins.TypeError, not just TypeError."""
    cls = type(exc)
    return f"{cls.__module__}.{cls.__qualname__}"


def log_exception(exc: BaseException) -> tuple[tuple[str, ...], bool]:
    """
    The logging filter: report the failure, then decline to handle it.

    Returns (log_lines, handled). handled is always False.
    """
    lines = (
        f"\tIn the log routine. Caught {qualified_type_name(exc)}",
        f"\tMessage: {exc}",
    )
    return (lines, False)


def to_failure(exc: BaseException) -> Failure:
    """Pure: BaseException -> Failure."""
    return Failure(
        kind=classify(exc),
        type_name=type(exc).__name__,
        message=str(exc),
    )


# =============================================================================
# TOUR STEPS - each yields the lines it would print
# =============================================================================


def names_step(person: Person) -> Iterator[str]:
    yield f"The name, in all caps: {person.to_all_caps_string()}"
    yield f"The name is: {person}"


def word_length_step(phrase: str) -> Iterator[str]:
    lengths = word_lengths(phrase)
    yield f"The average word length is: {average(lengths)}"
    yield f"The average word length is: {average(lengths):.2f}"


def safe_navigation_step() -> Iterator[str]:
    s: str | None = None
    yield render_optional(chain(s, len))

    c = chain(s, first_char)
    yield str(c is not None)

    ss: str | None = None
    has_more = coalesce(chain(ss, list, iter, move_next), False)
    yield str(has_more)


def exception_filter_step(
    policy: ExceptionPolicy,
    read: Callable[[str | None], int] = read_length,
) -> Iterator[str]:
    """
    Read the length of an absent text behind a logging filter.

    Only ABSENT_VALUE failures reach the filter; any other kind re-raises
    untouched. The filter declines, so the policy decides what happens next.
    """
    try:
        sss: str | None = None
        yield str(read(sss))
    except Exception as exc:
        if classify(exc) is not ErrorKind.ABSENT_VALUE:
            raise
        log_lines, handled = log_exception(exc)
        yield from log_lines
        if not handled and policy is ExceptionPolicy.PROPAGATE:
            raise
    yield HANDLED_LINE


def tour(person: Person, phrase: str, policy: ExceptionPolicy) -> Iterator[str]:
    """All transcript lines, in order. Failures escape as exceptions."""
    yield from names_step(person)
    yield from word_length_step(phrase)
    yield from safe_navigation_step()
    yield from exception_filter_step(policy)


def run_tour(
    person: Person,
    phrase: str = PHRASE,
    policy: ExceptionPolicy = ExceptionPolicy.PROPAGATE,
) -> TourOutcome:
    """
    Drain the tour into a TourOutcome.

    Lines printed before an escaped failure are kept; the failure itself is
    recorded rather than raised.
    """
    lines: list[str] = []
    try:
        for line in tour(person, phrase, policy):
            lines.append(line)
    except Exception as exc:
        return TourOutcome(lines=tuple(lines), failure=to_failure(exc))
    return TourOutcome(lines=tuple(lines), failure=None)


# =============================================================================
# RENDERERS (Pure: Data -> str)
# =============================================================================


def render_optional(value: object | None) -> str:
    """Absent renders as an empty line. Pure: value -> str."""
    return "" if value is None else str(value)


def render_error(message: str) -> str:
    """Render an error message. Pure: str -> str."""
    return f"Error: {message}"


def render_failure(failure: Failure) -> str:
    """Pure: Failure -> str."""
    kind = failure.kind.name.lower()
    return render_error(f"unhandled {kind} failure: {failure.type_name}: {failure.message}")


def render_outcome_text(outcome: TourOutcome) -> str:
    """Render outcome as the plain transcript. Pure: TourOutcome -> str."""
    lines = list(outcome.lines)
    if outcome.failure is not None:
        lines.append(render_failure(outcome.failure))
    return "\n".join(lines)


# =============================================================================
# MAIN (Orchestration) - Wiring only, single print at the end
# =============================================================================


def run(
    policy: ExceptionPolicy = ExceptionPolicy.PROPAGATE,
) -> tuple[int, str]:
    """
    Run the tour. Returns (exit_code, output_to_display).

    No I/O here; main() does the printing.
    """
    person = Person(DEFAULT_FIRST, DEFAULT_MIDDLE, DEFAULT_LAST)
    outcome = run_tour(person, PHRASE, policy)

    return (outcome.exit_code, render_outcome_text(outcome))


def main() -> int:
    """Entry point. Fixed inputs, prints once, exits."""
    exit_code, output = run()

    # Single print at the edge
    print(output)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
