"""
Fluent builder for PocketBase filter expressions.

The builder alternates between two roles.  Every predicate returns a
:class:`RestrictedFilterBuilder`, which only offers ``and_()`` / ``or_()``;
each of those hands the full :class:`FilterBuilder` back.  A chain can
therefore never place two predicates side by side, nor end on a dangling
combinator.

Example::

    q = FilterBuilder()
    q.equal("role", "admin").or_().group(
        lambda g: g.equal("role", "user").and_().greater_than("created", "@monthStart")
    )
    q.query
    # → "role={:role1} || (role={:role2} && created>@monthStart)"
    q.values
    # → {"role1": "admin", "role2": "user"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .operators import AND, OR, FilterOperator, is_date_macro
from .placeholders import ValuePlaceholderRegistry

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    FilterCallback = Callable[["FilterBuilder"], "RestrictedFilterBuilder"]


class FilterBuilder:
    """
    Accumulates one filter fragment and the values it references.

    A fresh instance (and registry) is used per filter-building session.
    Nested ``group()`` callbacks receive this same instance, so placeholder
    ordinals keep counting across groups.
    """

    def __init__(self, registry: ValuePlaceholderRegistry | None = None) -> None:
        self._registry = (
            registry if registry is not None else ValuePlaceholderRegistry()
        )
        self._query = ""

    @property
    def query(self) -> str:
        """The filter text accumulated so far."""
        return self._query

    @property
    def values(self) -> dict[str, Any]:
        """Placeholder key → value mapping for this session."""
        return self._registry.values

    # -- comparison ----------------------------------------------------------

    def equal(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.EQUAL, value)

    def not_equal(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.NOT_EQUAL, value)

    def greater_than(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.GREATER_THAN, value)

    def greater_than_or_equal(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.GREATER_THAN_OR_EQUAL, value)

    def less_than(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.LESS_THAN, value)

    def less_than_or_equal(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.LESS_THAN_OR_EQUAL, value)

    def like(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.LIKE, value)

    def not_like(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.NOT_LIKE, value)

    # -- multi-valued comparison ---------------------------------------------

    def any_equal(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.ANY_EQUAL, value)

    def any_not_equal(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.ANY_NOT_EQUAL, value)

    def any_greater_than(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.ANY_GREATER_THAN, value)

    def any_greater_than_or_equal(
        self, field: str, value: Any
    ) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.ANY_GREATER_THAN_OR_EQUAL, value)

    def any_less_than(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.ANY_LESS_THAN, value)

    def any_less_than_or_equal(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.ANY_LESS_THAN_OR_EQUAL, value)

    def any_like(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.ANY_LIKE, value)

    def any_not_like(self, field: str, value: Any) -> RestrictedFilterBuilder:
        return self._predicate(field, FilterOperator.ANY_NOT_LIKE, value)

    # -- helpers -------------------------------------------------------------

    def search(self, fields: Sequence[str], value: Any) -> RestrictedFilterBuilder:
        """Match *value* with ``~`` against any of *fields*."""
        return self._joined(
            [(field, FilterOperator.LIKE, value) for field in fields], OR
        )

    def in_(self, field: str, values: Sequence[Any]) -> RestrictedFilterBuilder:
        """*field* equals any of *values*."""
        return self._joined(
            [(field, FilterOperator.EQUAL, value) for value in values], OR
        )

    def not_in(self, field: str, values: Sequence[Any]) -> RestrictedFilterBuilder:
        """*field* differs from every one of *values*."""
        return self._joined(
            [(field, FilterOperator.NOT_EQUAL, value) for value in values], AND
        )

    def between(self, field: str, start: Any, end: Any) -> RestrictedFilterBuilder:
        """Inclusive range check."""
        return self._joined(
            [
                (field, FilterOperator.GREATER_THAN_OR_EQUAL, start),
                (field, FilterOperator.LESS_THAN_OR_EQUAL, end),
            ],
            AND,
        )

    def not_between(self, field: str, start: Any, end: Any) -> RestrictedFilterBuilder:
        """Strictly outside the range."""
        return self._joined(
            [
                (field, FilterOperator.LESS_THAN, start),
                (field, FilterOperator.GREATER_THAN, end),
            ],
            OR,
        )

    def is_null(self, field: str) -> RestrictedFilterBuilder:
        self._append(f"{field}=''")
        return self._restricted()

    def is_not_null(self, field: str) -> RestrictedFilterBuilder:
        self._append(f"{field}!=''")
        return self._restricted()

    def custom(self, raw: str) -> RestrictedFilterBuilder:
        """Append *raw* verbatim; the caller owns its correctness."""
        self._append(raw)
        return self._restricted()

    def group(self, callback: FilterCallback) -> RestrictedFilterBuilder:
        """Wrap whatever *callback* chains on this builder in parentheses."""
        self._append("(")
        callback(self)
        self._append(")")
        return self._restricted()

    # -- internals -----------------------------------------------------------

    def _append(self, text: str) -> None:
        self._query += text

    def _restricted(self) -> RestrictedFilterBuilder:
        return RestrictedFilterBuilder(self, self._append)

    def _expression(self, field: str, operator: FilterOperator, value: Any) -> None:
        if is_date_macro(value):
            self._append(f"{field}{operator.value}{value}")
        else:
            key = self._registry.reserve(field, value)
            self._append(f"{field}{operator.value}{{:{key}}}")

    def _predicate(
        self, field: str, operator: FilterOperator, value: Any
    ) -> RestrictedFilterBuilder:
        self._expression(field, operator, value)
        return self._restricted()

    def _joined(
        self,
        terms: list[tuple[str, FilterOperator, Any]],
        separator: str,
    ) -> RestrictedFilterBuilder:
        self._append("(")
        for index, (field, operator, value) in enumerate(terms):
            if index:
                self._append(separator)
            self._expression(field, operator, value)
        self._append(")")
        return self._restricted()


class RestrictedFilterBuilder:
    """
    State reached after a predicate: only a boolean combinator may follow.

    *emit* is the owning builder's text appender, handed over at
    construction so the combinator text lands in the same fragment.
    """

    __slots__ = ("_builder", "_emit")

    def __init__(self, builder: FilterBuilder, emit: Callable[[str], None]) -> None:
        self._builder = builder
        self._emit = emit

    def and_(self) -> FilterBuilder:
        self._emit(AND)
        return self._builder

    def or_(self) -> FilterBuilder:
        self._emit(OR)
        return self._builder
