from __future__ import annotations
"""HTTP transport for the vehicle enquiry service."""

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter, Retry

from .dump import dump_page
from .errors import TransportError
from .logger import Logger


log = Logger.bind(__name__)

CONFIRM_VEHICLE_URL = "https://vehicleenquiry.service.gov.uk/ConfirmVehicle"
VIEW_VEHICLE_URL = "https://vehicleenquiry.service.gov.uk/ViewVehicle"

DEFAULT_TIMEOUT = 15.0
DEFAULT_USER_AGENT = ("Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
                      "(KHTML, like Gecko) Chrome/127.0.0.0 Safari/537.36")

_CONFIG_JSON_PATH = Path(__file__).resolve().parent.parent / 'config.json'
_resolved_timeout = DEFAULT_TIMEOUT
_resolved_user_agent = DEFAULT_USER_AGENT
if _CONFIG_JSON_PATH.exists():
    try:
        with _CONFIG_JSON_PATH.open('r', encoding='utf-8') as f:
            _cfg = json.load(f) or {}
        if isinstance(_cfg, dict):
            if isinstance(_cfg.get('timeout'), (int, float)) and _cfg['timeout'] > 0:
                _resolved_timeout = float(_cfg['timeout'])
            if isinstance(_cfg.get('user_agent'), str) and _cfg['user_agent'].strip():
                _resolved_user_agent = _cfg['user_agent'].strip()
    except (OSError, ValueError) as e:
        log.debug(f"config.json load fail error={e}")


@dataclass
class ClientConfig:
    timeout: float = _resolved_timeout
    user_agent: str = _resolved_user_agent
    dump_dir: Optional[Path] = None  # write each stage's HTML here when set


class DvlaClient:
    """Form-posting client for the two enquiry pages.

    One request per call and no retries: a failed stage is reported, not
    repeated. Each response is closed before ``post_form`` returns.
    """

    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or ClientConfig()
        self.session = session or requests.Session()
        adapter = HTTPAdapter(max_retries=Retry(total=0))
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.session.headers.update({
            "User-Agent": self.config.user_agent,
            "Accept-Language": "en-GB,en;q=0.9",
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        })

    def post_form(self, url: str, data: Dict[str, str], stage: str = '') -> str:
        start = time.time()
        log.debug(f"http post start url={url} fields={sorted(data)}")
        try:
            with self.session.post(url, data=data, timeout=self.config.timeout) as resp:
                elapsed = time.time() - start
                log.debug(f"http post done url={url} final={resp.url} elapsed={elapsed:.2f}s status={resp.status_code}")
                resp.raise_for_status()
                # service pages are UTF-8; avoid a latin-1 guess when charset is absent
                if not resp.encoding or resp.encoding.lower() == 'iso-8859-1':
                    resp.encoding = 'utf-8'
                html = resp.text
        except requests.RequestException as e:
            log.warn(f"http post fail url={url} error={e}")
            raise TransportError(f"POST {url} failed: {e}") from e
        if self.config.dump_dir is not None:
            # diagnostics only, a failed dump never fails the lookup
            try:
                path = dump_page(dump_dir=Path(self.config.dump_dir), stage=stage or 'page', url=url, html=html, form=data)
                log.debug(f"page dumped path={path}")
            except OSError as e:
                log.warn(f"page dump fail dir={self.config.dump_dir} error={e}")
        return html

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


__all__ = ["DvlaClient", "ClientConfig", "CONFIRM_VEHICLE_URL", "VIEW_VEHICLE_URL"]
