"""Tests for display paths, breadcrumbs, and page metadata."""

import pytest

from consultancy import seo, storage


@pytest.fixture(autouse=True)
def _no_site_url_env(monkeypatch):
    monkeypatch.delenv("SITE_URL", raising=False)


# ── Paths ────────────────────────────────────────────────


def test_slug_or_id_prefers_valid_slug():
    assert seo.slug_or_id({"id": 3, "slug": "gst-basics"}) == "gst-basics"


def test_slug_or_id_falls_back_to_id():
    assert seo.slug_or_id({"id": 3, "slug": ""}) == "3"
    assert seo.slug_or_id({"id": 3}) == "3"
    assert seo.slug_or_id({"id": 3, "slug": "Not A Slug"}) == "3"


def test_service_path_uses_title_slug():
    assert seo.service_path({"id": 1, "title": "Audit & Compliance Services"}) == \
        "/services/audit-compliance-services"


def test_service_path_falls_back_to_id():
    assert seo.service_path({"id": 7, "title": "!!!"}) == "/services/7"


def test_service_path_prefixes_numeric_title():
    filler = storage.create_service("Filler", "First.", "box", [])
    numbered = storage.create_service("1", "Titled with a number.", "hash", [])
    path = seo.service_path(numbered)
    assert path == "/services/service-1"
    assert storage.get_service_by_identifier(path.rsplit("/", 1)[1]) == numbered
    assert storage.get_service_by_identifier(seo.service_path(filler).rsplit("/", 1)[1]) == filler


def test_training_program_path():
    assert seo.training_program_path({"id": 2, "slug": "iso-auditor"}) == "/training-programs/iso-auditor"


def test_canonical_url_uses_settings():
    assert seo.canonical_url("/about") == "https://bhumiconsultancy.in/about"
    storage.update_config({"site_url": "https://example.com/"})
    assert seo.canonical_url("contact") == "https://example.com/contact"


def test_canonical_url_explicit_site():
    assert seo.canonical_url("/x", "http://localhost:5000/") == "http://localhost:5000/x"


# ── Breadcrumbs ──────────────────────────────────────────


def test_breadcrumbs_home():
    assert seo.breadcrumbs("home") == [{"name": "Home", "url": "/"}]


def test_breadcrumbs_section():
    assert seo.breadcrumbs("training_programs") == [
        {"name": "Home", "url": "/"},
        {"name": "Training Programs", "url": "/training-programs"},
    ]


def test_breadcrumbs_detail():
    trail = seo.breadcrumbs("training_program_detail", "GST Basics", "/training-programs/gst-basics")
    assert trail[-1] == {"name": "GST Basics", "url": "/training-programs/gst-basics"}
    assert len(trail) == 3


def test_breadcrumbs_detail_requires_title():
    with pytest.raises(ValueError):
        seo.breadcrumbs("service_detail")


def test_breadcrumbs_unknown_page():
    with pytest.raises(ValueError):
        seo.breadcrumbs("blog")


def test_breadcrumbs_not_shared_between_calls():
    seo.breadcrumbs("about")[0]["name"] = "Changed"
    assert seo.breadcrumbs("about")[0]["name"] == "Home"


# ── Metadata ─────────────────────────────────────────────


def test_page_metadata():
    meta = seo.page_metadata("About Us", "Who we are.", "/about", keywords=["audit", "gst"])
    assert meta["title"] == "About Us | Bhumi Consultancy"
    assert meta["canonical_url"] == "https://bhumiconsultancy.in/about"
    assert meta["og:url"] == meta["canonical_url"]
    assert meta["keywords"] == "audit, gst"
    assert meta["twitter:card"] == "summary"
    assert "og:image" not in meta


def test_page_metadata_defaults():
    meta = seo.page_metadata("", None, "/")
    assert meta["title"] == "Bhumi Consultancy"
    assert meta["description"] == storage.get_config()["default_description"]


def test_page_metadata_relative_image():
    meta = seo.page_metadata("X", "Y", "/x", image="/images/x.png")
    assert meta["og:image"] == "https://bhumiconsultancy.in/images/x.png"
    assert meta["twitter:card"] == "summary_large_image"


def test_training_program_page():
    program = storage.create_training_program(
        "GST Practitioner Essentials", "GST workshop.", "Taxation", "5 days", price=7999
    )
    page = seo.training_program_page(program)
    assert page["path"] == "/training-programs/gst-practitioner-essentials"
    assert page["meta"]["og:type"] == "article"
    assert page["breadcrumbs"][-1]["url"] == page["path"]


def test_service_page():
    service = storage.create_service("Tax Advisory", "Tax planning.", "percent", ["Planning"])
    page = seo.service_page(service)
    assert page["path"] == "/services/tax-advisory"
    assert page["meta"]["keywords"] == "Tax Advisory, Planning"
