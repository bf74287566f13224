"""Positional predicate builder.

Predicates are written with a ``?`` marker for every bound value and kept
next to their values, so fragment text and parameter order cannot drift
apart. Placeholders are numbered only when the filter is rendered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import count
from typing import Any, Iterable, Literal

from parts_catalog.domain.errors import QueryBuildError

PLACEHOLDER = "?"

_PLACEHOLDER_RE = re.compile(re.escape(PLACEHOLDER))

PlaceholderStyle = Literal["numeric", "named"]


def _placeholder_count(fragment: str) -> int:
    return fragment.count(PLACEHOLDER)


@dataclass(frozen=True, slots=True)
class CompiledFilter:
    """
    Immutable list of predicate fragments and their bound values.

    Invariant: the fragments hold exactly ``len(values)`` placeholders, and
    the n-th placeholder binds the n-th value.
    """

    fragments: tuple[str, ...] = ()
    values: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        placeholders = sum(_placeholder_count(fragment) for fragment in self.fragments)
        if placeholders != len(self.values):
            raise QueryBuildError(
                "Placeholder count does not match bound value count",
                placeholders=placeholders,
                values=len(self.values),
            )

    @property
    def is_empty(self) -> bool:
        return not self.fragments

    def and_(self, fragment: str, *values: Any) -> CompiledFilter:
        """Return a new filter with one more fragment ANDed at the end."""
        return CompiledFilter(
            fragments=(*self.fragments, fragment),
            values=(*self.values, *values),
        )

    def render(self, style: PlaceholderStyle = "numeric") -> tuple[str, list[Any] | dict[str, Any]]:
        """
        Render the WHERE condition with numbered placeholders.

        Args:
            style: ``"numeric"`` renders ``$1, $2`` with a value list;
                ``"named"`` renders ``:p1, :p2`` with a value dict, the form
                SQLAlchemy ``text()`` expects.

        Returns:
            Tuple of (condition text, bound values). The text is empty when
            the filter has no fragments.
        """
        condition = " AND ".join(self.fragments)
        positions = count(1)

        if style == "numeric":
            rendered = _PLACEHOLDER_RE.sub(lambda _: f"${next(positions)}", condition)
            return rendered, list(self.values)

        rendered = _PLACEHOLDER_RE.sub(lambda _: f":p{next(positions)}", condition)
        return rendered, {f"p{index}": value for index, value in enumerate(self.values, start=1)}


class PredicateBuilder:
    """Accumulates (fragment, values) pairs into a CompiledFilter."""

    def __init__(self) -> None:
        self._fragments: list[str] = []
        self._values: list[Any] = []

    def add(self, fragment: str, *values: Any) -> PredicateBuilder:
        """
        Add a fragment holding one placeholder per value.

        Raises:
            QueryBuildError: If the fragment's placeholders and values differ in number
        """
        placeholders = _placeholder_count(fragment)
        if placeholders != len(values):
            raise QueryBuildError(
                "Fragment placeholder count does not match its values",
                fragment=fragment,
                placeholders=placeholders,
                values=len(values),
            )
        self._fragments.append(fragment)
        self._values.extend(values)
        return self

    def add_in(self, column: str, values: Iterable[Any]) -> PredicateBuilder:
        """Add ``column IN (...)``; an empty list adds nothing."""
        items = list(values)
        if not items:
            return self
        return self.add(f"{column} IN ({_markers(len(items))})", *items)

    def add_overlap(self, array_expression: str, values: Iterable[str]) -> PredicateBuilder:
        """Add an array overlap test against a text array; an empty list adds nothing."""
        items = list(values)
        if not items:
            return self
        return self.add(
            f"{array_expression} && CAST(ARRAY[{_markers(len(items))}] AS text[])",
            *items,
        )

    def build(self) -> CompiledFilter:
        return CompiledFilter(fragments=tuple(self._fragments), values=tuple(self._values))


def _markers(n: int) -> str:
    return ", ".join(PLACEHOLDER for _ in range(n))
