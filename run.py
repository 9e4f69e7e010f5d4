"""Command line entry: look up one registration mark and print it as JSON.

Usage:
    python run.py AB12CDE
    python run.py AB12CDE --debug --dump-dir dumps
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dvla.client import ClientConfig, DvlaClient
from dvla.errors import CheckError
from dvla.logger import Logger, setup_logging
from dvla.lookup import check


log = Logger.bind("run")


class App:

    def __init__(self, registration_mark: str, dump_dir: Optional[Path] = None):
        self.registration_mark = registration_mark
        self.dump_dir = dump_dir

    def run(self) -> int:
        config = ClientConfig(dump_dir=self.dump_dir)
        try:
            with DvlaClient(config) as client:
                record = check(self.registration_mark, client)
        except CheckError as e:
            log.error(f"lookup failed stage={e.stage} cause={type(e.cause).__name__}: {e.cause}")
            return 1
        print(json.dumps(record.to_dict(), ensure_ascii=False))
        return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog='dvla', description='Look up a vehicle on the DVLA enquiry service.')
    ap.add_argument('vrm', help='Vehicle registration mark, e.g. AB12CDE')
    ap.add_argument('--debug', action='store_true', help='Verbose logging')
    ap.add_argument('--dump-dir', type=Path, default=None, help='Write each page received to this directory')
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)
    return App(args.vrm, dump_dir=args.dump_dir).run()


if __name__ == "__main__":
    sys.exit(main())
