from enum import Enum
from typing import Any


class FilterOperator(str, Enum):
    """Comparison operators of the PocketBase filter grammar."""

    # Single-value comparison
    EQUAL = "="
    NOT_EQUAL = "!="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    LIKE = "~"
    NOT_LIKE = "!~"

    # Multi-valued ("any of") comparison
    ANY_EQUAL = "?="
    ANY_NOT_EQUAL = "?!="
    ANY_GREATER_THAN = "?>"
    ANY_GREATER_THAN_OR_EQUAL = "?>="
    ANY_LESS_THAN = "?<"
    ANY_LESS_THAN_OR_EQUAL = "?<="
    ANY_LIKE = "?~"
    ANY_NOT_LIKE = "?!~"


AND = " && "
OR = " || "

DATETIME_MACROS: frozenset[str] = frozenset(
    {
        "@now",
        "@yesterday",
        "@tomorrow",
        "@todayStart",
        "@todayEnd",
        "@monthStart",
        "@monthEnd",
        "@yearStart",
        "@yearEnd",
        "@second",
        "@minute",
        "@hour",
        "@day",
        "@month",
        "@year",
        "@weekday",
    }
)


def is_date_macro(value: Any) -> bool:
    """Return ``True`` if *value* is a relative datetime macro token."""
    return isinstance(value, str) and value in DATETIME_MACROS
