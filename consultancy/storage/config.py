"""Site settings (name, canonical URL, default SEO description, contact details)."""

import json
import os
from pathlib import Path
from typing import Any

from .core import data_dir

_CONFIG_DEFAULTS: dict[str, Any] = {
    "site_name": "Bhumi Consultancy",
    "site_url": "https://bhumiconsultancy.in",
    "default_description": (
        "Business consultancy, audit and compliance services, and professional "
        "training programs with verifiable certificates."
    ),
    "contact_email": "",
    "contact_phone": "",
    "social_links": {
        "facebook": "",
        "linkedin": "",
        "twitter": "",
        "instagram": "",
    },
}

_SCALAR_KEYS = ("site_name", "site_url", "default_description", "contact_email", "contact_phone")


def _config_path() -> Path:
    return data_dir() / "config.json"


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values.

    SITE_URL from the environment overrides the default but not a stored value.
    """
    config: dict[str, Any] = {key: _CONFIG_DEFAULTS[key] for key in _SCALAR_KEYS}
    config["social_links"] = dict(_CONFIG_DEFAULTS["social_links"])
    if os.getenv("SITE_URL"):
        config["site_url"] = os.getenv("SITE_URL")
    path = _config_path()
    if path.is_file():
        stored = json.loads(path.read_text())
        for key in _SCALAR_KEYS:
            if key in stored:
                config[key] = stored[key]
        if isinstance(stored.get("social_links"), dict):
            config["social_links"].update(stored["social_links"])
    config["site_url"] = config["site_url"].rstrip("/")
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge fields into config and persist. Returns full config."""
    config = get_config()
    for key in _SCALAR_KEYS:
        if key in fields:
            config[key] = fields[key]
    if isinstance(fields.get("social_links"), dict):
        config["social_links"].update(fields["social_links"])
    config["site_url"] = config["site_url"].rstrip("/")
    _config_path().write_text(json.dumps(config, indent=2))
    return config
