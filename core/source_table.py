# -*- coding: utf-8 -*-
"""
Static dispatch data for translation sources.

CATEGORIES maps the category suffix of a "你的翻译_<category>" header to the
flag that gates it and the key prefix its rows are written under.
SOURCE_FILES is the fixed processing order; later sources win on key
conflicts.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import betternames_config as config
from betternames_enums import HeaderPolicy


@dataclass(frozen=True)
class Category:
    name: str
    flag: str
    key_prefix: str


@dataclass(frozen=True)
class SourceSpec:
    """
    One entry of the source list.

    Attributes:
        file_name: File name inside the translation directory
        enable_flags: The file is attempted if any of these is on (empty: always)
        key_prefixes: Prefixes the file may write; the first is the fallback
            for categories missing from CATEGORIES
        policy: Header policy
        identity_column: Column holding a per-row identifier; when set, keys
            are built as prefix[identifier] instead of prefix:index
    """
    file_name: str
    enable_flags: Tuple[str, ...] = ()
    key_prefixes: Tuple[str, ...] = ()
    policy: HeaderPolicy = HeaderPolicy.NAMED_CATEGORY
    identity_column: Optional[int] = None

    @property
    def uses_identity_keys(self) -> bool:
        return self.identity_column is not None

    @property
    def uses_index_keys(self) -> bool:
        """Keys are prefix:row_index."""
        return self.policy == HeaderPolicy.NAMED_CATEGORY and not self.uses_identity_keys


_CATEGORY_LIST = (
    Category("巷名", "enable_alley_names", "Assets.ALLEY_NAME"),
    Category("公路名", "enable_highway_names", "Assets.HIGHWAY_NAME"),
    Category("街名", "enable_street_names", "Assets.STREET_NAME"),
    Category("桥名", "enable_bridge_names", "Assets.BRIDGE_NAME"),
    Category("坝名", "enable_dam_names", "Assets.DAM_NAME"),
    Category("女姓", "enable_citizen_female_surnames", "Assets.CITIZEN_SURNAME_FEMALE"),
    Category("家族姓", "enable_citizen_household_surnames", "Assets.CITIZEN_SURNAME_HOUSEHOLD"),
    Category("男姓", "enable_citizen_male_surnames", "Assets.CITIZEN_SURNAME_MALE"),
    Category("男名", "enable_citizen_male_names", "Assets.CITIZEN_NAME_MALE"),
    Category("女名", "enable_citizen_female_names", "Assets.CITIZEN_NAME_FEMALE"),
    Category("城市名", "enable_city_names", "Assets.CITY_NAME"),
    Category("区名", "enable_district_names", "Assets.DISTRICT_NAME"),
    Category("品牌名", "enable_company_names", config.BRAND_KEY_PREFIX),
    Category("狗名", "enable_dog_names", "Assets.ANIMAL_NAME_DOG"),
)

CATEGORIES = {c.name: c for c in _CATEGORY_LIST}

FORMAT_SOURCE = SourceSpec(config.FORMAT_FILE, policy=HeaderPolicy.CATALOG)

SOURCE_FILES: Tuple[SourceSpec, ...] = (
    FORMAT_SOURCE,
    SourceSpec(
        "巷公路街名.csv",
        ("enable_street_names", "enable_alley_names", "enable_highway_names"),
        ("Assets.ALLEY_NAME", "Assets.HIGHWAY_NAME", "Assets.STREET_NAME"),
    ),
    SourceSpec(
        "桥坝名.csv",
        ("enable_bridge_names", "enable_dam_names"),
        ("Assets.BRIDGE_NAME", "Assets.DAM_NAME"),
    ),
    SourceSpec(
        "姓氏.csv",
        ("enable_citizen_male_surnames", "enable_citizen_female_surnames", "enable_citizen_household_surnames"),
        ("Assets.CITIZEN_SURNAME_FEMALE", "Assets.CITIZEN_SURNAME_HOUSEHOLD", "Assets.CITIZEN_SURNAME_MALE"),
    ),
    SourceSpec("城市名.csv", ("enable_city_names",), ("Assets.CITY_NAME",)),
    SourceSpec("区名.csv", ("enable_district_names",), ("Assets.DISTRICT_NAME",)),
    SourceSpec("男名.csv", ("enable_citizen_male_names",), ("Assets.CITIZEN_NAME_MALE",)),
    SourceSpec("女名.csv", ("enable_citizen_female_names",), ("Assets.CITIZEN_NAME_FEMALE",)),
    SourceSpec("狗名.csv", ("enable_dog_names",), ("Assets.ANIMAL_NAME_DOG",)),
    SourceSpec("品牌名.csv", ("enable_company_names",), (config.BRAND_KEY_PREFIX,), identity_column=0),
)


def category_flag(category_name: str) -> Optional[str]:
    """Flag gating a category, or None for categories this table does not know."""
    category = CATEGORIES.get(category_name)
    return category.flag if category else None


def key_prefix_for(category_name: str, fallback_prefixes: Tuple[str, ...] = ()) -> str:
    """Key prefix for a category, falling back to the source's first prefix."""
    category = CATEGORIES.get(category_name)
    if category:
        return category.key_prefix
    return fallback_prefixes[0] if fallback_prefixes else config.UNKNOWN_KEY_PREFIX
