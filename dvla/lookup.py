from __future__ import annotations
"""Lookup orchestrator: confirm the mark, fetch the details page, extract the record."""
import enum
from typing import Optional

from .client import DvlaClient
from .extractor import fetch_details_page, parse_vehicle_record
from .errors import CheckError, DvlaError
from .logger import Logger
from .models import SessionTokenSet, VehicleRecord
from .negotiator import negotiate

log = Logger.bind(__name__)


class LookupState(enum.Enum):
    NEGOTIATING = 'negotiation'
    FETCHING = 'fetch'
    EXTRACTING = 'extraction'
    DONE = 'done'
    FAILED = 'failed'


class Check:
    """One registration lookup.

    States run strictly in order NEGOTIATING -> FETCHING -> EXTRACTING -> DONE.
    The first error moves to FAILED and is raised as CheckError naming the
    stage, with the original error as its cause. Nothing is retried and no
    partial record is returned.
    """

    def __init__(self, registration_mark: str, client: Optional[DvlaClient] = None):
        self.registration_mark = registration_mark
        self.client = client
        self.state = LookupState.NEGOTIATING
        self.failed_stage: Optional[str] = None

    def _enter(self, state: LookupState) -> None:
        log.debug(f"vrm={self.registration_mark} {self.state.name} -> {state.name}")
        self.state = state

    def _fail(self, error: DvlaError) -> CheckError:
        self.failed_stage = self.state.value
        log.warn(f"vrm={self.registration_mark} {self.failed_stage} failed error={error}")
        self._enter(LookupState.FAILED)
        return CheckError(self.failed_stage, error)

    def run(self, client: DvlaClient) -> VehicleRecord:
        if self.state is not LookupState.NEGOTIATING:
            raise RuntimeError(f"lookup already run state={self.state.name}")
        try:
            tokens: SessionTokenSet = negotiate(self.registration_mark, client)
            self._enter(LookupState.FETCHING)
            html = fetch_details_page(tokens, client)
            self._enter(LookupState.EXTRACTING)
            record = log.measure("details extraction", parse_vehicle_record, html)
        except DvlaError as e:
            raise self._fail(e) from e
        self._enter(LookupState.DONE)
        return record

    def __call__(self) -> VehicleRecord:
        if self.client is not None:
            return self.run(self.client)
        with DvlaClient() as client:
            return self.run(client)


def check(registration_mark: str, client: Optional[DvlaClient] = None) -> VehicleRecord:
    """Look up ``registration_mark`` and return its VehicleRecord.

    Raises CheckError; ``.stage`` tells which step failed and ``.cause`` holds
    the TransportError, ParseError, ContinuationNotFoundError,
    DetailsNotFoundError or MalformedItemError behind it.
    """
    done = log.time_block(f"check vrm={registration_mark}")
    try:
        return Check(registration_mark, client)()
    finally:
        done()
