from __future__ import annotations
"""Declarative description of the enquiry service markup.

Everything the parsers know about the service's HTML lives in the tables at
the bottom of this module; ``dvla.extract`` evaluates them. When the service
changes its layout, adjust the tables here.

Rules tagged ``required=True`` abort the lookup when nothing matches; the
others leave their fields empty.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FormRule:
    """Pick the first ``form`` whose action matches, read inputs by id."""
    action: str
    inputs: Tuple[Tuple[str, str], ...]  # (input id, output field)
    required: bool = True


@dataclass(frozen=True)
class ValueRule:
    """Text of the single element matching ``selector`` inside a scope."""
    field: str
    selector: str
    strip_prefix: str = ''
    required: bool = False


@dataclass(frozen=True)
class SectionRule:
    """Containers whose text holds ``marker``; later matches overwrite earlier ones."""
    container: str
    marker: str
    values: Tuple[ValueRule, ...]
    required: bool = False


@dataclass(frozen=True)
class LabelRule:
    label: str
    field: str


@dataclass(frozen=True)
class ListRule:
    """Labelled items: each item holds exactly one value element.

    Item text is tested against ``labels`` in order; the first label found
    decides the field.
    """
    container: str
    item: str
    value: str
    labels: Tuple[LabelRule, ...]
    required: bool = True


@dataclass(frozen=True)
class PageLayout:
    region: str
    values: Tuple[ValueRule, ...] = ()
    sections: Tuple[SectionRule, ...] = ()
    lists: Tuple[ListRule, ...] = ()


VIEW_VEHICLE_FORM_ACTION = "/ViewVehicle"
TAX_STATUS_MARKER = "Incorrect tax status?"
# value of the Correct field: the echoed vehicle was accepted
CONFIRMATION_ACCEPTED = "True"

CONTINUATION_FORM = FormRule(
    action=VIEW_VEHICLE_FORM_ACTION,
    inputs=(
        ('viewstate', 'state_token'),
        ('Vrm', 'registration'),
        ('Make', 'make'),
        ('Colour', 'colour'),
    ),
)

VEHICLE_ATTRIBUTES: Tuple[LabelRule, ...] = (
    LabelRule("Vehicle make", 'make'),
    LabelRule("Date of first registration", 'date_registered'),
    LabelRule("Year of manufacture", 'year_of_manufacture'),
    LabelRule("Cylinder capacity (cc)", 'cylinder_capacity'),
    LabelRule("CO₂Emissions", 'co2_emissions'),
    LabelRule("Fuel type", 'fuel_type'),
    LabelRule("Export marker", 'export_marker'),
    LabelRule("Vehicle status", 'vehicle_status'),
    LabelRule("Vehicle colour", 'colour'),
    LabelRule("Wheelplan", 'wheelplan'),
    LabelRule("Revenue weight", 'weight'),
)

DETAILS_LAYOUT = PageLayout(
    region='main',
    values=(ValueRule('registration', 'h1'), ),
    sections=(
        SectionRule(
            container='div.column-half',
            marker=TAX_STATUS_MARKER,
            values=(
                ValueRule('taxed', 'h2.heading-large'),
                ValueRule('tax_due', 'p.margin-bottom-1', strip_prefix="Tax due:"),
            ),
        ),
    ),
    lists=(
        ListRule(
            container='div.related-links',
            item='li',
            value='strong',
            labels=VEHICLE_ATTRIBUTES,
            required=True,
        ),
    ),
)
