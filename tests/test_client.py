"""Drive :mod:`supply_tools.client` against the real Flask app via the test client."""

from __future__ import annotations

import pytest
import requests

from conftest import FlaskSession
from supply_tools import client as client_module
from supply_tools.client import (
    SupplyClientError,
    SupplyRequestClient,
    filter_requests,
    normalize_request_id,
    summarize,
)

BASE_URL = f"{FlaskSession.base}/api"

SAMPLE = [
    {"id": "SR001", "itemName": "Flour", "requestedBy": "john", "status": "pending", "priority": "urgent"},
    {"id": "SR002", "itemName": "Gloves", "requestedBy": "mary", "status": "approved", "priority": "low"},
    {"id": "SR003", "itemName": "Baking trays", "requestedBy": "John", "status": "pending", "priority": "high"},
]


@pytest.fixture
def api(api_session):
    return SupplyRequestClient(BASE_URL, session=api_session)


def _new_request(api, item="Gloves"):
    return api.create_request({
        "itemName": item,
        "quantityRequested": 4,
        "priority": "medium",
        "requestedBy": "john",
        "notes": "keep me",
    })


@pytest.mark.parametrize("value,expected", [
    (7, "SR007"),
    ("7", "SR007"),
    ("sr7", "SR007"),
    ("SR012", "SR012"),
    (1234, "SR1234"),
])
def test_normalize_request_id(value, expected):
    assert normalize_request_id(value) == expected


def test_normalize_request_id_rejects_garbage():
    with pytest.raises(SupplyClientError):
        normalize_request_id("abc")


def test_summarize_counts():
    assert summarize(SAMPLE) == {"total": 3, "pending": 2, "approved": 1, "urgent": 1}
    assert summarize([]) == {"total": 0, "pending": 0, "approved": 0, "urgent": 0}


def test_filter_requests():
    assert [r["id"] for r in filter_requests(SAMPLE, search="JOHN")] == ["SR001", "SR003"]
    assert [r["id"] for r in filter_requests(SAMPLE, search="sr002")] == ["SR002"]
    assert [r["id"] for r in filter_requests(SAMPLE, status="pending", priority="high")] == ["SR003"]
    assert filter_requests(SAMPLE) == SAMPLE


def test_create_list_and_delete(api):
    new_id = _new_request(api)
    items = api.list_requests()
    assert [item["id"] for item in items] == [normalize_request_id(new_id)]

    api.delete_request(new_id)
    assert api.list_requests() == []


def test_delete_missing_request_raises_with_status(api):
    with pytest.raises(SupplyClientError) as excinfo:
        api.delete_request("SR404")
    assert excinfo.value.status_code == 404


def test_approve_keeps_other_fields(api):
    new_id = _new_request(api)
    api.approve(new_id)

    item = api.get_request(new_id)
    assert item["status"] == "approved"
    assert item["notes"] == "keep me"
    assert item["quantityRequested"] == 4


def test_only_pending_requests_change_status(api):
    new_id = _new_request(api)
    api.reject(new_id)
    assert api.get_request(new_id)["status"] == "rejected"

    with pytest.raises(SupplyClientError):
        api.approve(new_id)


def test_status_change_for_unknown_request(api):
    with pytest.raises(SupplyClientError) as excinfo:
        api.approve("SR999")
    assert excinfo.value.status_code == 404


def test_transport_errors_become_client_errors():
    class DownSession:
        def request(self, method, url, timeout=None, **kwargs):
            raise requests.ConnectionError("connection refused")

    api = SupplyRequestClient(BASE_URL, session=DownSession())
    with pytest.raises(SupplyClientError) as excinfo:
        api.list_requests()
    assert excinfo.value.status_code is None


def test_cli_commands(monkeypatch, api_session, tmp_path, capsys):
    monkeypatch.setattr(
        client_module,
        "SupplyRequestClient",
        lambda url: SupplyRequestClient(url, session=api_session),
    )
    common = ["--url", BASE_URL, "--log-file", str(tmp_path / "client.log")]

    assert client_module.main(common + [
        "create", "--item", "Masks", "--quantity", "3", "--priority", "urgent", "--requested-by", "mary",
    ]) == 0
    created_id = capsys.readouterr().out.strip()
    assert created_id.startswith("SR")

    assert client_module.main(common + ["stats"]) == 0
    out = capsys.readouterr().out
    assert "total: 1" in out
    assert "urgent: 1" in out

    assert client_module.main(common + ["approve", created_id]) == 0
    assert client_module.main(common + ["approve", created_id]) == 1

    assert client_module.main(common + ["list", "--status", "approved"]) == 0
    assert "Masks" in capsys.readouterr().out

    assert client_module.main(common + ["delete", created_id]) == 0
    assert client_module.main(common + ["delete", created_id]) == 1
