"""
Area index (lookup tables)
==========================

Maps URL keys to series so areas typed by a human or taken from a URL slug
("united-kingdom", "new-york") can be found without scanning.

Example:
- `idx.find("United Kingdom")` gives the country-level series.
- `idx.find("us", "New York")` gives the province series.
- `idx.find("", "")` gives the global series, if one was indexed.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .log import get_logger
from .series import Series, key

logger = get_logger(__name__)

@dataclass
class AreaIndex:
    """Series keyed by (country key, province key)."""
    by_key: Dict[Tuple[str, str], Series]
    provinces_by_country: Dict[str, List[str]]

    def find(self, country: str, province: str = "") -> Optional[Series]:
        return self.by_key.get((key(country), key(province)))

    def countries(self) -> List[str]:
        """Country names, sorted, with a country-level series."""
        return sorted(s.country for (c, p), s in self.by_key.items() if c and not p)

    def provinces(self, country: str) -> List[str]:
        return self.provinces_by_country.get(key(country), [])

    def __len__(self) -> int:
        return len(self.by_key)

def build_area_index(series: Iterable[Series]) -> AreaIndex:
    """Index series by key; a later duplicate replaces an earlier one."""
    by_key: Dict[Tuple[str, str], Series] = {}
    provinces_by_country: Dict[str, List[str]] = {}

    for s in series:
        k = (key(s.country), key(s.province))
        if k in by_key:
            logger.warning("duplicate area %s (id %d replaces id %d)", s, s.id, by_key[k].id)
        by_key[k] = s

    for s in by_key.values():
        if s.is_province():
            provinces_by_country.setdefault(key(s.country), []).append(s.province)
    for names in provinces_by_country.values():
        names.sort()

    return AreaIndex(by_key=by_key, provinces_by_country=provinces_by_country)
