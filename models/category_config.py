# -*- coding: utf-8 -*-
"""
Read-only configuration snapshot consulted during ingestion.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping

import betternames_config as config
from betternames_settings import FLAG_KEYS, OFFICIAL_FIXES_FLAG, PRESET_KEY, default_settings


@dataclass(frozen=True)
class CategoryConfiguration:
    """
    Immutable set of boolean flags plus the preset selector.

    Attributes:
        flags: flag name -> enabled
        preset: Preset directory name, or CUSTOM_PRESET for the user directory
    """
    flags: Mapping[str, bool] = field(default_factory=lambda: MappingProxyType({f: True for f in FLAG_KEYS}))
    preset: str = config.DEFAULT_PRESET

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CategoryConfiguration':
        """Build a snapshot from a settings dict; missing flags default to on."""
        defaults = default_settings()
        flags = {flag: bool(data.get(flag, defaults[flag])) for flag in FLAG_KEYS}
        preset = data.get(PRESET_KEY) or config.DEFAULT_PRESET
        return cls(flags=MappingProxyType(flags), preset=preset)

    def with_flags(self, **overrides: bool) -> 'CategoryConfiguration':
        """Copy with some flags changed."""
        flags = dict(self.flags)
        flags.update(overrides)
        return CategoryConfiguration(flags=MappingProxyType(flags), preset=self.preset)

    def is_enabled(self, flag: str) -> bool:
        return bool(self.flags.get(flag, True))

    def any_enabled(self, flags: Iterable[str]) -> bool:
        """OR of several flags; an empty list means always enabled."""
        flags = tuple(flags)
        if not flags:
            return True
        return any(self.is_enabled(flag) for flag in flags)

    @property
    def official_fixes_enabled(self) -> bool:
        return self.is_enabled(OFFICIAL_FIXES_FLAG)

    @property
    def is_custom_mode(self) -> bool:
        return self.preset == config.CUSTOM_PRESET
