"""Display paths, canonical URLs, breadcrumbs, and head-tag metadata.

Training programs link by their stored slug, falling back to the numeric id
for records that predate slugs. Services have no stored slug; their path
segment is derived from the title (prefixed "service-" when it is all
digits) and falls back to the id when the title has no sluggable characters.
"""

from typing import Any

from consultancy import storage
from consultancy.slugs import is_valid_slug

HOME = {"name": "Home", "url": "/"}

_SECTIONS: dict[str, dict[str, str]] = {
    "about": {"name": "About Us", "url": "/about"},
    "contact": {"name": "Contact", "url": "/contact"},
    "services": {"name": "Services", "url": "/services"},
    "training_programs": {"name": "Training Programs", "url": "/training-programs"},
    "verify_certificate": {"name": "Verify Certificate", "url": "/verify-certificate"},
}

_DETAIL_PARENTS = {
    "service_detail": "services",
    "training_program_detail": "training_programs",
}


def slug_or_id(entity: dict[str, Any]) -> str:
    slug = entity.get("slug")
    if is_valid_slug(slug):
        return slug
    return str(entity["id"])


def service_path(service: dict[str, Any]) -> str:
    return f"/services/{storage.service_slug(service) or service['id']}"


def training_program_path(program: dict[str, Any]) -> str:
    return f"/training-programs/{slug_or_id(program)}"


def canonical_url(path: str, site_url: str | None = None) -> str:
    base = (site_url or storage.get_config()["site_url"]).rstrip("/")
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{base}{path}"


def breadcrumbs(page: str, title: str | None = None, path: str | None = None) -> list[dict[str, str]]:
    """Breadcrumb trail for a page.

    Detail pages ("service_detail", "training_program_detail") need the
    entity title and its display path.
    """
    if page == "home":
        return [dict(HOME)]
    if page in _SECTIONS:
        return [dict(HOME), dict(_SECTIONS[page])]
    if page in _DETAIL_PARENTS:
        if not title or not path:
            raise ValueError(f"Breadcrumbs for '{page}' need a title and path")
        parent = _SECTIONS[_DETAIL_PARENTS[page]]
        return [dict(HOME), dict(parent), {"name": title, "url": path}]
    raise ValueError(f"Unknown page '{page}'")


def page_metadata(
    title: str,
    description: str | None,
    path: str,
    *,
    keywords: list[str] | None = None,
    image: str | None = None,
    og_type: str = "website",
) -> dict[str, Any]:
    """Head tags for a page: title, description, canonical URL, Open Graph and Twitter cards."""
    config = storage.get_config()
    full_title = f"{title} | {config['site_name']}" if title else config["site_name"]
    description = description or config["default_description"]
    url = canonical_url(path, config["site_url"])
    meta: dict[str, Any] = {
        "title": full_title,
        "description": description,
        "canonical_url": url,
        "og:title": full_title,
        "og:description": description,
        "og:url": url,
        "og:type": og_type,
        "og:site_name": config["site_name"],
        "twitter:card": "summary_large_image" if image else "summary",
        "twitter:title": full_title,
        "twitter:description": description,
    }
    if image:
        image_url = image if image.startswith(("http://", "https://")) else canonical_url(image, config["site_url"])
        meta["og:image"] = image_url
        meta["twitter:image"] = image_url
    if keywords:
        meta["keywords"] = ", ".join(keywords)
    return meta


def service_page(service: dict[str, Any]) -> dict[str, Any]:
    path = service_path(service)
    return {
        "path": path,
        "meta": page_metadata(
            service["title"],
            service["description"],
            path,
            keywords=[service["title"], *service.get("features", [])],
        ),
        "breadcrumbs": breadcrumbs("service_detail", service["title"], path),
    }


def training_program_page(program: dict[str, Any]) -> dict[str, Any]:
    path = training_program_path(program)
    return {
        "path": path,
        "meta": page_metadata(
            program["title"],
            program["description"],
            path,
            keywords=[program["title"], program["category"], "training", "certification"],
            image=program.get("image_path"),
            og_type="article",
        ),
        "breadcrumbs": breadcrumbs("training_program_detail", program["title"], path),
    }
