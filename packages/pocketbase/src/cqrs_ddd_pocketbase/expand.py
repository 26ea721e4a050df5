"""ExpandPathExtractor — derive the ``expand`` list from selected field paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import DEFAULT_CONFIG

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .config import ParamsConfig


class ExpandPathExtractor:
    """
    Collect the relations implied by ``expand.``-prefixed field paths.

    ``expand.profile.expand.preferences.theme`` yields ``profile`` and
    ``profile.preferences``: marker segments are skipped and the final
    segment is a leaf field, unless it is listed in
    ``ParamsConfig.nested_relation_fields``.
    """

    def __init__(self, config: ParamsConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    def extract(self, fields: Iterable[str]) -> list[str]:
        """Return distinct relation paths in first-seen order."""
        relations: list[str] = []
        seen: set[str] = set()
        for path in fields:
            for relation in self._relations_of(str(path)):
                if relation not in seen:
                    seen.add(relation)
                    relations.append(relation)
        return relations

    def _relations_of(self, path: str) -> list[str]:
        marker = self._config.expand_marker
        parts = path.split(".")
        if parts[0] != marker:
            return []

        out: list[str] = []
        current: list[str] = []
        last = len(parts) - 1
        for index in range(1, len(parts)):
            part = parts[index]
            if part == marker:
                continue
            current.append(part)
            if index < last or part in self._config.nested_relation_fields:
                out.append(".".join(current))
        return out
