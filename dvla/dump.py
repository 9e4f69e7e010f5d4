from __future__ import annotations
"""Page dump helper.

Persists the raw HTML of a lookup stage plus request metadata so a service
layout change can be inspected after a failed lookup.
"""
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

# the state token is session bound and useless to keep
_REDACTED_FIELDS = ('viewstate', )


def dump_page(*, dump_dir: Path, stage: str, url: str, html: str, form: Optional[Dict[str, str]] = None, snippet_bytes: int = 8000) -> Path:
    dump_dir.mkdir(parents=True, exist_ok=True)
    (dump_dir / f"{stage}.html").write_text(html, encoding='utf-8', errors='replace')
    out_path = dump_dir / f"{stage}.json"
    payload = {
        'stage': stage,
        'url': url,
        'fetched_at': datetime.now(timezone.utc).isoformat(),
        'form': {k: ('<redacted>' if k in _REDACTED_FIELDS else v) for k, v in (form or {}).items()},
        'html_length': len(html),
        'html_snippet': html[:snippet_bytes],
    }
    out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding='utf-8')
    return out_path
