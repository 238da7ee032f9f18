"""Tests for the deposit model and resource colors."""

import pytest

from minemap.catalog.models import (
    DEFAULT_COLOR,
    RESOURCE_COLORS,
    SAMPLE_DEPOSITS,
    Deposit,
    DepositStatus,
    resource_color,
)


@pytest.mark.unit
class TestResourceColor:

    def test_known_kinds(self):
        assert resource_color("Gold") == "#FFD700"
        assert resource_color("Iron Ore") == "#8B4513"
        assert resource_color("Nickel") == "#D3D3D3"

    def test_unknown_kind_falls_back(self):
        assert resource_color("Uranium") == DEFAULT_COLOR
        assert resource_color("") == DEFAULT_COLOR
        assert resource_color(None) == DEFAULT_COLOR

    def test_every_known_kind_has_a_color(self):
        assert len(RESOURCE_COLORS) == 8
        for kind in RESOURCE_COLORS:
            assert resource_color(kind).startswith("#")


@pytest.mark.unit
class TestDeposit:

    def test_from_dict_snake_case(self):
        d = Deposit.from_dict({
            "id": "7",
            "company_name": "Glencore",
            "project_name": "Antamina",
            "resource": "Zinc",
            "latitude": "-9.54",
            "longitude": -77.05,
            "country": "Peru",
            "status": "Exploration",
            "description": None,
            "created_at": "2024-01-01T00:00:00",
        })
        assert d.id == 7
        assert d.latitude == pytest.approx(-9.54)
        assert d.status == "Exploration"
        assert d.description == ""

    def test_from_dict_defaults_status(self):
        row = SAMPLE_DEPOSITS[0].to_dict()
        del row["status"]
        assert Deposit.from_dict(row).status == DepositStatus.ACTIVE.value

    def test_payload_has_no_id(self):
        payload = SAMPLE_DEPOSITS[1].to_payload()
        assert "id" not in payload
        assert payload["company_name"] == "BHP"

    def test_title_and_color(self):
        d = SAMPLE_DEPOSITS[1]
        assert d.title == "Escondida - BHP"
        assert d.color == "#B87333"

    def test_sample_set(self):
        assert [d.id for d in SAMPLE_DEPOSITS] == [1, 2, 3, 4, 5, 6]
        assert {d.resource for d in SAMPLE_DEPOSITS} == {"Gold", "Copper", "Silver", "Iron Ore"}
        assert SAMPLE_DEPOSITS[1].latitude == -24.2370
