"""Integration tests: curve file -> engine -> HTTP quote."""

import json

import pytest
from fastapi.testclient import TestClient

import balancing
from balancing.api.main import app
from balancing.models import load_curve_file
from tests.helpers import units


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestPublicApi:
    def test_top_level_exports(self, curves_dir):
        curve = load_curve_file(curves_dir / "two_point.json")
        assert balancing.locate(curve, units(100)).index == 1
        assert balancing.integrate(curve, 2, units(200), units(250)) == 10**18
        assert balancing.deposit_fee(curve, units(150), units(100)) == 1_875_000_000_000_000_000
        fee = balancing.balancing_fee(
            curve, units(250), units(100), balancing.FlowDirection.REFUND
        )
        assert fee == -1_875_000_000_000_000_000


class TestHttpMatchesEngine:
    @pytest.mark.parametrize(
        ("direction", "balance", "amount"),
        [
            ("deposit", 0, units(500)),
            ("deposit", units(175), units(1)),
            ("refund", units(300), units(250)),
            ("refund", units(100), 0),
        ],
    )
    def test_quote(self, client, curves_dir, direction, balance, amount):
        path = curves_dir / "two_point.json"
        curve = load_curve_file(path)
        expected = balancing.balancing_fee(
            curve, balance, amount, balancing.FlowDirection(direction)
        )

        body = {
            "curve": json.loads(path.read_text()),
            "runningBalance": str(balance),
            "amount": str(amount),
        }
        response = client.post(f"/fees/{direction}", json=body)

        assert response.status_code == 200
        assert int(response.json()["fee"]) == expected
