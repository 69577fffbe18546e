"""FastAPI API endpoints under /api.

Endpoint groups: settings (health, site settings, slug helper, notification
status), services, training-programs, participants, certificates (including
public verify-certificate and check-status), contacts, and seo (page
metadata for detail pages). Services and training programs accept either a
numeric id or a slug in GET paths; mutations address them by id.
"""

from fastapi import APIRouter

from .certificates import router as certificates_router
from .contacts import router as contacts_router
from .participants import router as participants_router
from .seo import router as seo_router
from .services import router as services_router
from .settings import router as settings_router
from .training_programs import router as training_programs_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(services_router)
router.include_router(training_programs_router)
router.include_router(participants_router)
router.include_router(certificates_router)
router.include_router(contacts_router)
router.include_router(seo_router)
