"""
Location registry: the State -> District -> Mandal/Tehsil hierarchy.

The registry is an immutable value built once from static records. All
lookups are case-insensitive and every list-returning query returns canonical
names sorted ascending with duplicates removed, so the dataset can be
authored in any order.

A lookup miss (unknown or blank name) is not an error: queries return an
empty tuple and resolvers return None.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from django.conf import settings
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)

Names = Tuple[str, ...]


def normalize_name(name: Optional[str]) -> str:
    """Lookup key for a region name: trimmed and case-folded ('' when unset)."""
    if not name or not isinstance(name, str):
        return ''
    return name.strip().casefold()


def sorted_names(names: Iterable[str]) -> Names:
    return tuple(sorted(set(names)))


@dataclass(frozen=True)
class District:
    name: str
    mandals: Names = ()

    def find_mandal(self, name: Optional[str]) -> Optional[str]:
        key = normalize_name(name)
        if not key:
            return None
        for mandal in self.mandals:
            if normalize_name(mandal) == key:
                return mandal
        return None


@dataclass(frozen=True)
class State:
    name: str
    districts: Tuple[District, ...] = ()

    def find_district(self, name: Optional[str]) -> Optional[District]:
        key = normalize_name(name)
        if not key:
            return None
        for district in self.districts:
            if normalize_name(district.name) == key:
                return district
        return None


class LocationRegistry:
    """
    Read-only three-level location hierarchy.

    Build it with LocationRegistry.from_records() and pass it to whatever
    needs it; get_registry() returns the process-wide default.
    """

    def __init__(self, states: Iterable[State]):
        self._states: Tuple[State, ...] = tuple(states)
        index: Dict[str, State] = {}

        for state in self._states:
            key = normalize_name(state.name)
            if not key:
                raise ValueError('State name cannot be blank')
            if key in index:
                raise ValueError(f'Duplicate state in registry: {state.name}')

            seen = set()
            for district in state.districts:
                district_key = normalize_name(district.name)
                if not district_key:
                    raise ValueError(f'Blank district name in {state.name}')
                if district_key in seen:
                    raise ValueError(f'Duplicate district "{district.name}" in {state.name}')
                seen.add(district_key)

            index[key] = state

        self._index = index

    @classmethod
    def from_records(cls, records: Iterable[Mapping]) -> 'LocationRegistry':
        """
        Build a registry from plain records:

            {'state': 'Goa', 'districts': [{'district': 'North Goa', 'mandals': [...]}]}
        """
        states = []
        for record in records:
            districts = tuple(
                District(
                    name=item['district'],
                    mandals=tuple(mandal for mandal in item.get('mandals', ()) if mandal),
                )
                for item in record.get('districts', ())
            )
            states.append(State(name=record['state'], districts=districts))
        return cls(states)

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._states)

    def __contains__(self, state_name) -> bool:
        return self.get_state(state_name) is not None

    def __repr__(self):
        return f'<LocationRegistry: {len(self)} states>'

    # Lookups

    def get_state(self, name: Optional[str]) -> Optional[State]:
        return self._index.get(normalize_name(name))

    def get_district(self, state_name: Optional[str], district_name: Optional[str]) -> Optional[District]:
        state = self.get_state(state_name)
        if state is None:
            return None
        return state.find_district(district_name)

    def resolve_state(self, name: Optional[str]) -> Optional[str]:
        """Canonical spelling of a State name, or None."""
        state = self.get_state(name)
        return state.name if state else None

    def resolve_district(self, state_name: Optional[str], district_name: Optional[str]) -> Optional[str]:
        district = self.get_district(state_name, district_name)
        return district.name if district else None

    def resolve_mandal(self, state_name: Optional[str], district_name: Optional[str],
                       mandal_name: Optional[str]) -> Optional[str]:
        district = self.get_district(state_name, district_name)
        if district is None:
            return None
        return district.find_mandal(mandal_name)

    # Queries

    def list_states(self) -> Names:
        return sorted_names(state.name for state in self._states)

    def list_districts(self, state_name: Optional[str]) -> Names:
        state = self.get_state(state_name)
        if state is None:
            return ()
        return sorted_names(district.name for district in state.districts)

    def list_mandals(self, state_name: Optional[str], district_name: Optional[str]) -> Names:
        district = self.get_district(state_name, district_name)
        if district is None:
            return ()
        return sorted_names(district.mandals)

    def list_all_districts(self) -> Names:
        """
        Every District name across every State, de-duplicated.

        Convenience view for contexts without a State. Same-named districts
        in different States collapse into one entry.
        """
        return sorted_names(
            district.name
            for state in self._states
            for district in state.districts
        )

    def list_mandals_by_district_only(self, district_name: Optional[str]) -> Names:
        """
        Mandals of the first State (in registry order) holding a matching District.

        Not authoritative: when several States have a District with this name,
        only the first one is consulted. Prefer list_mandals() whenever the
        State is known.
        """
        for state in self._states:
            district = state.find_district(district_name)
            if district is not None:
                return sorted_names(district.mandals)
        return ()


@lru_cache(maxsize=None)
def load_registry(dataset_path: str) -> LocationRegistry:
    records: Sequence[Mapping] = import_string(dataset_path)
    registry = LocationRegistry.from_records(records)
    logger.info(f"Location registry loaded from {dataset_path}: {len(registry)} states")
    return registry


def get_registry() -> LocationRegistry:
    """Default registry, built from the LOCATIONS_DATASET setting."""
    dataset_path = getattr(settings, 'LOCATIONS_DATASET', 'apps.locations.data.INDIA_LOCATIONS')
    return load_registry(dataset_path)
