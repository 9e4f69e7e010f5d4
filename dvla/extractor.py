from __future__ import annotations
"""Stage 2: post the continuation tokens and read the vehicle details page."""
from typing import Optional

from .client import VIEW_VEHICLE_URL, DvlaClient
from .extract import extract_page, parse_document
from .layout import DETAILS_LAYOUT
from .models import SessionTokenSet, VehicleRecord


def fetch_details_page(tokens: SessionTokenSet, client: Optional[DvlaClient] = None) -> str:
    form = tokens.to_form()
    if client is None:
        with DvlaClient() as owned:
            return owned.post_form(VIEW_VEHICLE_URL, form, stage='details')
    return client.post_form(VIEW_VEHICLE_URL, form, stage='details')


def parse_vehicle_record(html: str) -> VehicleRecord:
    """Build a VehicleRecord from the details page.

    Raises ParseError, DetailsNotFoundError (no attribute list) or
    MalformedItemError (an attribute item without exactly one value).
    """
    soup = parse_document(html)
    return VehicleRecord(**extract_page(soup, DETAILS_LAYOUT))


def fetch_details(tokens: SessionTokenSet, client: Optional[DvlaClient] = None) -> VehicleRecord:
    return parse_vehicle_record(fetch_details_page(tokens, client))
