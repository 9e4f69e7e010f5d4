from __future__ import annotations
"""Stage 1: submit the registration mark and recover the continuation tokens."""
from typing import Optional

from .client import CONFIRM_VEHICLE_URL, DvlaClient
from .extract import extract_form, parse_document
from .layout import CONTINUATION_FORM
from .logger import Logger
from .models import SessionTokenSet

log = Logger.bind(__name__)


def parse_continuation(html: str) -> SessionTokenSet:
    """Read the hidden inputs of the continuation form on the confirmation page.

    Raises ParseError for unreadable markup and ContinuationNotFoundError when
    the form or any of its four inputs is missing or empty, which is what an
    unknown registration mark or a layout change looks like.
    """
    soup = parse_document(html)
    values = extract_form(soup, CONTINUATION_FORM)
    return SessionTokenSet(**values)


def negotiate(registration_mark: str, client: Optional[DvlaClient] = None) -> SessionTokenSet:
    # the mark is sent as typed, the service does its own validation
    form = {'Vrm': registration_mark, 'Continue': ''}
    if client is None:
        with DvlaClient() as owned:
            html = owned.post_form(CONFIRM_VEHICLE_URL, form, stage='confirm')
    else:
        html = client.post_form(CONFIRM_VEHICLE_URL, form, stage='confirm')
    tokens = parse_continuation(html)
    log.debug(f"continuation tokens found vrm={tokens.registration} make={tokens.make}")
    return tokens
