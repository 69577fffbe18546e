"""Storage initialization, path helpers, and JSON collection helpers."""

import json
from pathlib import Path
from typing import Any

_data_dir: Path | None = None


def init_storage(data_dir: Path) -> None:
    global _data_dir
    _data_dir = data_dir
    _data_dir.mkdir(parents=True, exist_ok=True)


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def collection_path(name: str) -> Path:
    return data_dir() / f"{name}.json"


def load_collection(name: str) -> list[dict[str, Any]]:
    """Load a collection list. Returns [] if the file does not exist yet."""
    path = collection_path(name)
    if not path.is_file():
        return []
    return json.loads(path.read_text())


def save_collection(name: str, items: list[dict[str, Any]]) -> None:
    collection_path(name).write_text(json.dumps(items, indent=2))


def next_id(items: list[dict[str, Any]]) -> int:
    return max((item["id"] for item in items), default=0) + 1


def find_by_id(items: list[dict[str, Any]], item_id: int) -> dict[str, Any] | None:
    for item in items:
        if item["id"] == item_id:
            return item
    return None


def is_numeric_id(identifier: str) -> bool:
    """True for path parameters like "42" that address an entity by id rather than slug."""
    return identifier.isascii() and identifier.isdigit()
