from types import SimpleNamespace
from typing import Dict, List

import pytest
import requests

from dvla.client import ClientConfig, DvlaClient


CONFIRM_HTML = '''
<html><body>
<main>
  <form action="/Search" method="post">
    <input id="Vrm" name="Vrm" value="IGNORED">
  </form>
  <form action="/ViewVehicle" method="post">
    <input type="hidden" id="viewstate" name="viewstate" value="tok1">
    <input type="hidden" id="Vrm" name="Vrm" value="AB12CDE">
    <input type="hidden" id="Make" name="Make" value="FORD">
    <input type="hidden" id="Colour" name="Colour" value="BLUE">
    <input type="radio" id="Correct_True" name="Correct" value="True">
    <button name="Continue">Continue</button>
  </form>
</main>
</body></html>
'''

DETAILS_HTML = '''
<html><body>
<main id="content">
  <h1 class="reg-mark">
    AB12 CDE
  </h1>
  <div class="grid-row">
    <div class="column-half">
      <h2 class="heading-large">Taxed</h2>
      <p class="margin-bottom-1">Tax due: 1 March 2025</p>
      <a href="/tax">Incorrect tax status?</a>
    </div>
    <div class="column-half">
      <h2 class="heading-large">MOT</h2>
      <p class="margin-bottom-1">Expires: 2 April 2025</p>
    </div>
  </div>
  <div class="related-links">
    <ul>
      <li>Vehicle make: <strong> FORD </strong></li>
      <li>Date of first registration: <strong>March 2012</strong></li>
      <li>Year of manufacture: <strong>2012</strong></li>
      <li>Cylinder capacity (cc): <strong>1596 cc</strong></li>
      <li>CO₂Emissions: <strong>139 g/km</strong></li>
      <li>Fuel type: <strong>PETROL</strong></li>
      <li>Export marker: <strong>No</strong></li>
      <li>Vehicle status: <strong>Tax not due</strong></li>
      <li>Vehicle colour: <strong>BLUE</strong></li>
      <li>Wheelplan: <strong>2 AXLE RIGID BODY</strong></li>
      <li>Revenue weight: <strong>Not available</strong></li>
    </ul>
  </div>
</main>
</body></html>
'''


class FakeResp(SimpleNamespace):

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.closed = True


class FakeSession:
    """Serves canned pages by URL and records every POST."""

    def __init__(self, pages: Dict[str, object]):
        self.pages = pages
        self.headers: Dict[str, str] = {}
        self.calls: List[SimpleNamespace] = []
        self.responses: List[FakeResp] = []
        self.mounted: List[str] = []
        self.closed = False

    def mount(self, prefix, adapter):
        self.mounted.append(prefix)

    def post(self, url, data=None, timeout=None):
        self.calls.append(SimpleNamespace(url=url, data=dict(data or {}), timeout=timeout))
        page = self.pages[url]
        if isinstance(page, Exception):
            raise page
        status = 200
        if isinstance(page, tuple):
            status, page = page
        resp = FakeResp(url=url, status_code=status, encoding='utf-8', text=page, closed=False)
        self.responses.append(resp)
        return resp

    def close(self):
        self.closed = True


@pytest.fixture
def make_client():

    def _make(pages, **config):
        session = FakeSession(pages)
        return DvlaClient(ClientConfig(**config), session=session), session

    return _make
