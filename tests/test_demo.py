"""Tests for demo data creation."""

from consultancy import storage
from consultancy.demo import create_demo_data


def test_demo_data_is_browsable():
    storage.create_contact("Old", "old@example.com", "stale", "Left over from a previous run.")
    create_demo_data()

    assert storage.list_contacts() == []
    assert len(storage.list_services()) == 3
    assert storage.get_service_by_identifier("gst-registration-filing") is not None

    slugs = [p["slug"] for p in storage.list_training_programs()]
    assert slugs == ["iso-9001-internal-auditor", "gst-practitioner-essentials"]


def test_demo_certificate_verifies():
    create_demo_data()
    result = storage.verify_certificate("BC-2024-0001", "Asha Verma")
    assert result["training"]["slug"] == "iso-9001-internal-auditor"
