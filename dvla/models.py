from __future__ import annotations
"""Lookup data structures: the continuation token set and the vehicle record."""
from dataclasses import asdict, dataclass, field, fields
from typing import Dict

from .errors import ContinuationNotFoundError
from .layout import CONFIRMATION_ACCEPTED


@dataclass(frozen=True)
class SessionTokenSet:
    """Hidden state echoed from the confirmation page.

    Values are kept verbatim. Construction fails unless all four strings are
    non-empty, so a partially populated set never exists.
    """
    state_token: str
    registration: str
    make: str
    colour: str
    confirmed: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        missing = tuple(f.name for f in fields(self) if f.name != 'confirmed' and not getattr(self, f.name))
        if missing:
            raise ContinuationNotFoundError(missing=missing)

    def to_form(self) -> Dict[str, str]:
        """Form body for the details request."""
        return {
            'viewstate': self.state_token,
            'Vrm': self.registration,
            'Make': self.make,
            'Colour': self.colour,
            'Correct': CONFIRMATION_ACCEPTED,
            'Continue': '',
        }


# attribute name -> JSON key emitted by the command line
_JSON_KEYS: Dict[str, str] = {
    'registration': 'registration',
    'make': 'make',
    'taxed': 'taxed',
    'date_registered': 'dateRegistered',
    'year_of_manufacture': 'yearOfManufacture',
    'cylinder_capacity': 'cylinderCapacity',
    'co2_emissions': 'co2Emissions',
    'fuel_type': 'fuelType',
    'export_marker': 'exportMarker',
    'vehicle_status': 'taxStatus',
    'tax_due': 'taxDue',
    'colour': 'colour',
    'wheelplan': 'wheelplan',
    'weight': 'weight',
}


@dataclass(frozen=True)
class VehicleRecord:
    """One vehicle as rendered by the details page.

    registration, taxed and tax_due are read from the page header and the
    tax panel; every other field comes from the labelled attribute list.
    Unrendered labels leave the field as an empty string.
    """
    registration: str = ''
    make: str = ''
    taxed: str = ''
    tax_due: str = ''
    date_registered: str = ''
    year_of_manufacture: str = ''
    cylinder_capacity: str = ''
    co2_emissions: str = ''
    fuel_type: str = ''
    export_marker: str = ''
    vehicle_status: str = ''
    colour: str = ''
    wheelplan: str = ''
    weight: str = ''

    def to_dict(self) -> Dict[str, str]:
        d = asdict(self)
        return {_JSON_KEYS[k]: d[k] for k in _JSON_KEYS}


__all__ = ["SessionTokenSet", "VehicleRecord"]
