#!/usr/bin/env python3
"""
Export the landing page whitelist to JSON or CSV.

The whitelist only lives in the API process's memory, so export it
before restarting or redeploying the server.  The script talks to the
running API over HTTP using the shared whitelist password.

Usage:
    python export_whitelist.py --url http://localhost:8000 --format csv --output whitelist.csv

If --password is omitted, the WHITELIST_PASSWORD environment variable
is used, and failing that you will be prompted for it.
"""

import argparse
import csv
import getpass
import json
import os
import sys
from typing import Any, Dict, List, Optional, TextIO

from landing_api_client import LandingAPI

CSV_FIELDS = ["id", "email", "createdAt"]


def write_entries(entries: List[Dict[str, Any]], fmt: str, out: TextIO) -> None:
    """Write ``entries`` to ``out`` as ``json`` or ``csv``."""
    if fmt == "csv":
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for entry in entries:
            writer.writerow(entry)
    else:
        json.dump(entries, out, indent=2, ensure_ascii=False)
        out.write("\n")


def main(argv: Optional[List[str]] = None, client: Optional[LandingAPI] = None) -> int:
    ap = argparse.ArgumentParser(description="Export whitelist emails from the landing page API.")
    ap.add_argument("--url", default=os.getenv("LANDING_API_URL", "http://localhost:8000"), help="Base URL of the API server")
    ap.add_argument("--password", help="Whitelist password. Defaults to $WHITELIST_PASSWORD or a prompt.")
    ap.add_argument("--format", choices=("json", "csv"), default="json", help="Output format")
    ap.add_argument("--output", help="Output file. Defaults to stdout.")
    args = ap.parse_args(argv)

    password = args.password or os.getenv("WHITELIST_PASSWORD") or getpass.getpass("Whitelist password: ")
    if not password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    api = client or LandingAPI(base_url=args.url)
    entries, error = api.list_whitelist(password)
    if error:
        print(f"[!] Export failed ({error.get('status_code')}): {error.get('message')}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            write_entries(entries, args.format, f)
        print(f"[+] Exported {len(entries)} entries to {args.output}", file=sys.stderr)
    else:
        write_entries(entries, args.format, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
