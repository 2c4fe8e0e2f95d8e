"""
client.py
---------
Command-line client for the supply request API. Lists, creates, approves,
rejects and deletes requests over HTTP the same way the supply request page
does, and prints the page's summary counters.

Usage:
    supply-client [--url URL] list [--search TEXT] [--status S] [--priority P]
    supply-client stats
    supply-client create --item NAME --quantity N --priority P --requested-by USER
    supply-client approve SR001
    supply-client reject SR001
    supply-client delete SR001
"""

import argparse
import logging
import sys

import requests

from supply_tools import config
from supply_tools.utils import setup_logging

ID_PREFIX = "SR"

# Fields sent back on PUT; the API overwrites every one of them
RECORD_FIELDS = (
    "itemName",
    "quantityRequested",
    "priority",
    "requestedBy",
    "neededBy",
    "notes",
    "supplierInfo",
)


class SupplyClientError(Exception):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


def normalize_request_id(value):
    """Return the SR### form for 7, "7", "sr7" or "SR007"."""
    text = str(value).strip()
    if text.upper().startswith(ID_PREFIX):
        text = text[len(ID_PREFIX):]
    try:
        return f"{ID_PREFIX}{int(text):03d}"
    except ValueError:
        raise SupplyClientError(f"Invalid supply request id: {value!r}")


def summarize(supply_requests):
    stats = {"total": len(supply_requests), "pending": 0, "approved": 0, "urgent": 0}
    for item in supply_requests:
        if item.get("status") == "pending":
            stats["pending"] += 1
        if item.get("status") == "approved":
            stats["approved"] += 1
        if item.get("priority") == "urgent":
            stats["urgent"] += 1
    return stats


def filter_requests(supply_requests, search=None, status=None, priority=None):
    """Substring search over item, id and requester, plus exact status/priority filters."""
    term = (search or "").lower()
    matches = []
    for item in supply_requests:
        haystack = [item.get("itemName") or "", item.get("id") or "", item.get("requestedBy") or ""]
        if term and not any(term in str(value).lower() for value in haystack):
            continue
        if status and item.get("status") != status:
            continue
        if priority and item.get("priority") != priority:
            continue
        matches.append(item)
    return matches


class SupplyRequestClient:
    """Thin wrapper around the /supply-requests endpoints."""

    def __init__(self, base_url=config.BACKEND_URL, timeout=config.BACKEND_TIMEOUT, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, request_id=None):
        url = f"{self.base_url}/supply-requests"
        if request_id is not None:
            url = f"{url}/{normalize_request_id(request_id)}"
        return url

    def _request(self, method, url, **kwargs):
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise SupplyClientError(f"Error contacting backend: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 400:
            detail = payload.get("error") if isinstance(payload, dict) else response.text
            raise SupplyClientError(
                f"{method} {url} failed: {response.status_code} {detail}",
                status_code=response.status_code,
            )
        return payload

    def list_requests(self):
        return self._request("GET", self._url())

    def get_request(self, request_id):
        wanted = normalize_request_id(request_id)
        for item in self.list_requests():
            if item.get("id") == wanted:
                return item
        return None

    def create_request(self, data):
        """POST a new request; returns the generated numeric id."""
        return self._request("POST", self._url(), json=data)["id"]

    def update_request(self, request_id, data):
        return self._request("PUT", self._url(request_id), json=data)

    def delete_request(self, request_id):
        return self._request("DELETE", self._url(request_id))

    def set_status(self, request_id, status):
        """Move a pending request to `status`, keeping every other field as stored."""
        record = self.get_request(request_id)
        if record is None:
            raise SupplyClientError(f"Supply request {request_id} not found", status_code=404)
        if record.get("status") != "pending":
            raise SupplyClientError(
                f"Only pending requests can be changed ({record['id']} is {record.get('status')})"
            )
        data = {field: record.get(field) for field in RECORD_FIELDS}
        data["status"] = status
        return self.update_request(record["id"], data)

    def approve(self, request_id):
        return self.set_status(request_id, "approved")

    def reject(self, request_id):
        return self.set_status(request_id, "rejected")


def format_row(item):
    return (f"{item['id']:<8} {item.get('itemName') or '':<24} {item.get('quantityRequested')!s:>5} "
            f"{item.get('priority') or '':<8} {item.get('status') or '':<9} {item.get('requestedBy') or ''}")


def build_parser():
    parser = argparse.ArgumentParser(description="PAU Inventory supply request client")
    parser.add_argument("--url", default=config.BACKEND_URL, help="API base URL")
    parser.add_argument("--log-file", default=config.LOG_FILE, help="Log file path")
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List supply requests")
    list_cmd.add_argument("--search")
    list_cmd.add_argument("--status")
    list_cmd.add_argument("--priority")

    sub.add_parser("stats", help="Show request counters")

    create = sub.add_parser("create", help="Submit a new supply request")
    create.add_argument("--item", required=True)
    create.add_argument("--quantity", type=int, required=True)
    create.add_argument("--priority", required=True)
    create.add_argument("--requested-by", required=True)
    create.add_argument("--needed-by")
    create.add_argument("--notes")
    create.add_argument("--supplier")

    for name in ("approve", "reject", "delete"):
        cmd = sub.add_parser(name, help=f"{name.capitalize()} a supply request")
        cmd.add_argument("request_id")
    return parser


def run_command(client, args):
    if args.command == "list":
        items = filter_requests(client.list_requests(), args.search, args.status, args.priority)
        for item in items:
            print(format_row(item))
        logging.info(f"Listed {len(items)} supply requests")
    elif args.command == "stats":
        for key, value in summarize(client.list_requests()).items():
            print(f"{key}: {value}")
    elif args.command == "create":
        new_id = client.create_request({
            "itemName": args.item,
            "quantityRequested": args.quantity,
            "priority": args.priority,
            "requestedBy": args.requested_by,
            "neededBy": args.needed_by,
            "notes": args.notes,
            "supplierInfo": args.supplier,
        })
        print(normalize_request_id(new_id))
        logging.info(f"Supply request created: {normalize_request_id(new_id)}")
    elif args.command == "approve":
        client.approve(args.request_id)
        logging.info(f"Supply request {args.request_id} approved")
    elif args.command == "reject":
        client.reject(args.request_id)
        logging.info(f"Supply request {args.request_id} rejected")
    elif args.command == "delete":
        client.delete_request(args.request_id)
        logging.info(f"Supply request {args.request_id} deleted")


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, logging.DEBUG if config.DEBUG_MODE else logging.INFO)
    client = SupplyRequestClient(args.url)
    try:
        run_command(client, args)
    except SupplyClientError as e:
        logging.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
