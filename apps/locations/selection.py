"""
Cascading State -> District -> Mandal selection.

One LocationSelection lives for the lifetime of a form. Setting an ancestor
always clears its descendants, so a District or Mandal can never outlive the
State it was picked under:

    mandal set  =>  district set (and inside the state)  =>  state set

Incoming values are checked against the options computed from the current
ancestors. A value that is not on offer is stored as unset, and every stored
value uses the registry's canonical spelling.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .registry import LocationRegistry, Names, get_registry

logger = logging.getLogger(__name__)


class LocationField(str, enum.Enum):
    STATE = 'state'
    DISTRICT = 'district'
    MANDAL = 'mandal'


LOCATION_FIELDS = (LocationField.STATE, LocationField.DISTRICT, LocationField.MANDAL)


@dataclass(frozen=True)
class FieldChange:
    """A field-change event: which level changed and its new raw value."""

    field: LocationField
    value: Optional[str] = None

    @classmethod
    def from_raw(cls, field: str, value: Optional[str] = None) -> 'FieldChange':
        """Build from plain strings; raises ValueError for an unknown field name."""
        return cls(field=LocationField(field), value=value)


class LocationSelection:

    def __init__(self, registry: Optional[LocationRegistry] = None, state: Optional[str] = None,
                 district: Optional[str] = None, mandal: Optional[str] = None):
        self.registry = registry if registry is not None else get_registry()
        self.state: Optional[str] = None
        self.district: Optional[str] = None
        self.mandal: Optional[str] = None

        # Seed top-down so each level is validated against its ancestors
        self.set_state(state)
        self.set_district(district)
        self.set_mandal(mandal)

    # Transitions

    def set_state(self, value: Optional[str]) -> None:
        """Select a State; District and Mandal are always cleared."""
        self.state = self._accept(LocationField.STATE, value, self.registry.resolve_state(value))
        self.district = None
        self.mandal = None

    def set_district(self, value: Optional[str]) -> None:
        """Select a District within the current State; Mandal is always cleared."""
        resolved = None
        if self.state is not None:
            resolved = self.registry.resolve_district(self.state, value)
        self.district = self._accept(LocationField.DISTRICT, value, resolved)
        self.mandal = None

    def set_mandal(self, value: Optional[str]) -> None:
        resolved = None
        if self.district is not None:
            resolved = self.registry.resolve_mandal(self.state, self.district, value)
        self.mandal = self._accept(LocationField.MANDAL, value, resolved)

    def apply(self, change: FieldChange) -> 'LocationSelection':
        setter = {
            LocationField.STATE: self.set_state,
            LocationField.DISTRICT: self.set_district,
            LocationField.MANDAL: self.set_mandal,
        }[LocationField(change.field)]
        setter(change.value)
        return self

    def clear(self) -> None:
        self.set_state(None)

    def _accept(self, field: LocationField, raw: Optional[str], resolved: Optional[str]) -> Optional[str]:
        if resolved is None and raw and str(raw).strip():
            logger.debug(f"Dropping {field.value} {raw!r}: not available under {self.as_dict()}")
        return resolved

    # Derived options

    @property
    def district_options(self) -> Names:
        if self.state is None:
            return ()
        return self.registry.list_districts(self.state)

    @property
    def mandal_options(self) -> Names:
        if self.state is None or self.district is None:
            return ()
        return self.registry.list_mandals(self.state, self.district)

    @property
    def district_enabled(self) -> bool:
        return self.state is not None

    @property
    def mandal_enabled(self) -> bool:
        return self.district is not None

    @property
    def is_complete(self) -> bool:
        return self.mandal is not None

    def missing_fields(self) -> List[str]:
        return [field.value for field in LOCATION_FIELDS if getattr(self, field.value) is None]

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {
            'state': self.state,
            'district': self.district,
            'mandal': self.mandal,
        }

    def __eq__(self, other):
        if not isinstance(other, LocationSelection):
            return NotImplemented
        return self.registry is other.registry and self.as_dict() == other.as_dict()

    def __repr__(self):
        return f'<LocationSelection: {self.state} / {self.district} / {self.mandal}>'
