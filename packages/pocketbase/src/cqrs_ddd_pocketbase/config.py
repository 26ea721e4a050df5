"""Configuration for parameter building."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class ParamsConfig:
    """
    Immutable settings shared by :class:`ParamsBuilder` and
    :class:`ExpandPathExtractor`.

    Attributes:
        expand_marker: Path segment that means "follow this relation",
            e.g. ``expand.profile.bio``.
        nested_relation_fields: Names that are treated as relations even
            when they are the last segment of an expand path.
        default_per_page: ``perPage`` used when ``page()`` is called
            without an explicit count.
    """

    expand_marker: str = "expand"
    nested_relation_fields: frozenset[str] = field(
        default_factory=lambda: frozenset({"preferences"})
    )
    default_per_page: int = 20

    def with_nested_relations(self, *names: str) -> ParamsConfig:
        """Return a copy with *names* added to ``nested_relation_fields``."""
        return replace(
            self, nested_relation_fields=self.nested_relation_fields | set(names)
        )


DEFAULT_CONFIG = ParamsConfig()
