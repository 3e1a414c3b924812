# -*- coding: utf-8 -*-
"""
TranslationStore: the published key -> localized string mapping.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Optional

from betternames_logger import get_logger

logger = get_logger("core.translation_store")

INDEX_SEPARATOR = ":"


class _Snapshot(NamedTuple):
    entries: Dict[str, str]
    override_counts: Dict[str, int]
    index_counts: Dict[str, int]


def _empty_snapshot() -> _Snapshot:
    return _Snapshot({}, {}, {})


class TranslationStore:
    """
    The single key -> localized string mapping handed to lookup hooks.

    A load builds a fresh store off to the side and then publishes it into
    the live one with replace(), which swaps one reference and detaches the
    builder. Readers never see a half-merged mapping.
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._snapshot = _empty_snapshot()
        if entries:
            self.add_entries(entries)

    def clear(self):
        self._snapshot = _empty_snapshot()

    def add_entries(self, entries: Mapping[str, str], indexed: bool = False) -> int:
        """
        Merge entries; an existing key is overwritten.

        Args:
            entries: key -> translation
            indexed: Every key was produced as prefix:row_index; the prefix
                domain sizes are recorded for index_counts()

        Returns:
            Number of keys that replaced an existing value.
        """
        current, overrides, index_counts = self._snapshot
        replaced = 0
        for key, value in entries.items():
            if key in current:
                overrides[key] = overrides.get(key, 0) + 1
                replaced += 1
            current[key] = value
            if indexed:
                prefix, _, index = key.rpartition(INDEX_SEPARATOR)
                size = int(index) + 1
                if size > index_counts.get(prefix, 0):
                    index_counts[prefix] = size
        if replaced:
            logger.debug(f"{replaced} existing keys overridden")
        return replaced

    def replace(self, other: 'TranslationStore'):
        """
        Publish another store's content in one step.

        other is left empty, so later writes to it never reach this store.
        """
        self._snapshot = other._snapshot
        other._snapshot = _empty_snapshot()
        logger.debug(f"Store published with {self.count()} entries")

    def count(self) -> int:
        return len(self._snapshot.entries)

    def __len__(self):
        return self.count()

    def __contains__(self, key):
        return key in self._snapshot.entries

    def lookup(self, key: str) -> Optional[str]:
        """Exact-match lookup; None means defer to the host's own text."""
        return self._snapshot.entries.get(key)

    def as_mapping(self) -> Mapping[str, str]:
        """Read-only view of the current entries."""
        return MappingProxyType(self._snapshot.entries)

    def override_count(self, key: str) -> int:
        """How many times a key's value was replaced while building."""
        return self._snapshot.override_counts.get(key, 0)

    def overridden_keys(self) -> List[str]:
        return sorted(self._snapshot.override_counts)

    def index_counts(self) -> Dict[str, int]:
        """
        Size of each prefix:index domain (max index + 1).

        Only entries merged with indexed=True are counted; catalog keys and
        identity-column keys never are.
        """
        return dict(self._snapshot.index_counts)
