"""Create demo services, programs, participants, and certificates for development."""

import shutil

from consultancy import storage

DEMO_SERVICES = [
    {
        "title": "Audit & Compliance Services",
        "description": "Statutory, internal, and tax audits with end-to-end compliance support.",
        "icon": "clipboard-check",
        "features": ["Statutory audit", "Internal audit", "Tax audit", "Compliance reviews"],
    },
    {
        "title": "GST Registration & Filing",
        "description": "Registration, monthly and annual returns, and reconciliation.",
        "icon": "file-text",
        "features": ["GST registration", "Return filing", "Input credit reconciliation"],
    },
    {
        "title": "ISO Certification Consulting",
        "description": "Gap analysis, documentation, and audit readiness for ISO standards.",
        "icon": "award",
        "features": ["ISO 9001", "ISO 14001", "ISO 45001", "Internal auditor training"],
    },
]

DEMO_PROGRAMS = [
    {
        "title": "ISO 9001:2015 Internal Auditor",
        "slug": "iso-9001-internal-auditor",
        "description": "Plan, conduct, and report internal audits of a quality management system.",
        "category": "Quality Management",
        "duration": "2 days",
        "online_price": 4999,
        "offline_price": 6999,
        "delivery_mode": "both",
    },
    {
        "title": "GST Practitioner Essentials",
        "description": "Hands-on GST returns, e-invoicing, and reconciliation workshop.",
        "category": "Taxation",
        "duration": "5 days",
        "price": 7999,
    },
]


def create_demo_data() -> None:
    """Wipe existing data and create fresh demo content."""
    if storage.data_dir().exists():
        shutil.rmtree(storage.data_dir())
    storage.init_storage(storage.data_dir())

    for service in DEMO_SERVICES:
        storage.create_service(**service)

    programs = []
    for program in DEMO_PROGRAMS:
        fields = dict(program)
        programs.append(storage.create_training_program(
            fields.pop("title"),
            fields.pop("description"),
            fields.pop("category"),
            fields.pop("duration"),
            **fields,
        ))

    participant = storage.create_participant(
        participant_id="BC-P-0001",
        full_name="Asha Verma",
        email="asha.verma@example.com",
        training_program_id=programs[0]["id"],
        enrollment_date="2024-01-15T09:00:00+00:00",
    )
    storage.create_certificate(
        certificate_id="BC-2024-0001",
        participant_id=participant["id"],
        training_program_id=programs[0]["id"],
        issue_date="2024-01-17T00:00:00+00:00",
        expiry_date="2027-01-17T00:00:00+00:00",
    )
