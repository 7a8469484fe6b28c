"""
Lens catalog.

Read-only registry of lens metadata, keyed by lens id. Built once and
passed into the recommender, so tests can swap in a smaller catalog.
"""

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .constants import AccessScope, EntryCost, IntentClass
from .data.lens_catalog import CATALOG_VERSION, LENS_CATALOG_DATA
from .models import LensCatalogEntry


def _as_tuple(value: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def entry_from_dict(row: Mapping[str, Any]) -> LensCatalogEntry:
    """
    Build a catalog entry from a plain dict.

    Raises:
        ValueError: Missing id/name or unknown cost, scope or intent value
    """
    lens_id = row.get('lens_id')
    name = row.get('name')
    if not lens_id or not name:
        raise ValueError(f"Catalog row needs 'lens_id' and 'name': {dict(row)!r}")

    try:
        intent_tags = tuple(IntentClass(tag) for tag in _as_tuple(row.get('intent_tags')))
        entry_cost = EntryCost(row.get('entry_cost', EntryCost.LOW.value))
        required_scope = AccessScope(row.get('required_scope', AccessScope.NONE.value))
    except ValueError as e:
        raise ValueError(f"Invalid catalog row '{lens_id}': {e}") from e

    return LensCatalogEntry(
        lens_id=lens_id,
        name=name,
        domain_tags=_as_tuple(row.get('domain_tags')),
        intent_tags=intent_tags,
        entry_cost=entry_cost,
        supported_actions=_as_tuple(row.get('supported_actions')),
        required_scope=required_scope,
        categories=_as_tuple(row.get('categories')),
        recommended_when=_as_tuple(row.get('recommended_when')),
        suppress_when=_as_tuple(row.get('suppress_when')),
    )


class LensCatalog:
    """
    Immutable, ordered map of lens id to LensCatalogEntry.

    Iteration follows insertion order, which is also the tie-break
    order of the scoring model.
    """

    def __init__(self, entries: Iterable[LensCatalogEntry], version: str = CATALOG_VERSION):
        self.version = version
        self._entries: Tuple[LensCatalogEntry, ...] = tuple(entries)
        self._by_id: Dict[str, LensCatalogEntry] = {}
        for entry in self._entries:
            if entry.lens_id in self._by_id:
                raise ValueError(f"Duplicate lens id in catalog: {entry.lens_id}")
            self._by_id[entry.lens_id] = entry

    @classmethod
    def from_dicts(cls, rows: Iterable[Mapping[str, Any]], version: str = CATALOG_VERSION) -> 'LensCatalog':
        """Build a catalog from plain dict rows."""
        return cls((entry_from_dict(row) for row in rows), version=version)

    def get(self, lens_id: str) -> Optional[LensCatalogEntry]:
        """Get entry by lens id."""
        return self._by_id.get(lens_id)

    def ids(self) -> List[str]:
        """All lens ids in catalog order."""
        return [entry.lens_id for entry in self._entries]

    def __iter__(self) -> Iterator[LensCatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, lens_id: object) -> bool:
        return lens_id in self._by_id

    def __repr__(self) -> str:
        return f"LensCatalog(version={self.version}, lenses={len(self._entries)})"


_default_catalog = None


def get_default_catalog() -> LensCatalog:
    """
    Get the process-wide catalog built from LENS_CATALOG_DATA.

    Returns:
        Singleton LensCatalog instance
    """
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = LensCatalog.from_dicts(LENS_CATALOG_DATA)
    return _default_catalog


def get_recommender_entry(lens_id: str) -> Optional[LensCatalogEntry]:
    """Look up a lens in the default catalog."""
    return get_default_catalog().get(lens_id)
