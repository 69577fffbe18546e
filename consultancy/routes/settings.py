"""Health check, site settings, slug helper, and notification status endpoints."""

from fastapi import APIRouter

from consultancy import storage
from consultancy.notifications import get_notifier
from consultancy.slugs import generate_slug, is_valid_slug

from .models import UpdateSettings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings():
    """Get site settings (name, canonical URL, SEO defaults, contact details)."""
    return storage.get_config()


@router.patch("/settings")
async def update_settings(body: UpdateSettings):
    """Update site settings (partial merge)."""
    return storage.update_config(body.model_dump(exclude_none=True))


@router.get("/slug")
async def suggest_slug(title: str = ""):
    """Suggest a URL slug for a title. An empty slug means the title needs a manual one."""
    slug = generate_slug(title)
    return {"slug": slug, "valid": is_valid_slug(slug)}


@router.get("/slug/validate")
async def validate_slug(slug: str = ""):
    """Check whether a hand-edited slug is well formed."""
    return {"slug": slug, "valid": is_valid_slug(slug)}


@router.get("/notifications/status")
async def notifications_status():
    """Whether Telegram contact alerts are configured."""
    return get_notifier().status()


@router.post("/notifications/test")
async def notifications_test():
    """Send a test message to the configured Telegram chat."""
    return await get_notifier().send_test_message()
