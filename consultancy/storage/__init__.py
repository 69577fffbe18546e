"""File-based JSON storage, one list file per collection.

Data layout:
  data/
    services.json            Consultancy services (title, description, icon, features)
    training-programs.json   Training programs, each with a unique URL slug
    participants.json        Enrolled trainees (public participant code, program)
    certificates.json        Issued certificates (public certificate code, expiry)
    contacts.json            Contact form submissions and follow-up status
    config.json              Site settings (name, canonical URL, SEO defaults)

Ids are integers assigned as max(id) + 1 within a collection. Only training
programs store a slug; service slugs are derived from the title when needed.
Program slugs are made unique here by suffixing -1, -2, ... on collision.

Config: get_config() returns defaults merged with stored values.
update_config() applies partial updates: social_links merged key-by-key,
scalars overwritten.
"""

# Re-export all public symbols so `from consultancy import storage` keeps working.

from .core import (  # noqa: F401
    data_dir,
    init_storage,
    is_numeric_id,
)

from .services import (  # noqa: F401
    create_service,
    delete_service,
    get_service,
    get_service_by_identifier,
    list_services,
    service_slug,
    update_service,
)

from .training_programs import (  # noqa: F401
    DELIVERY_MODES,
    create_training_program,
    delete_training_program,
    get_training_program,
    list_training_programs,
    update_training_program,
)

from .participants import (  # noqa: F401
    create_participant,
    delete_participant,
    find_participant,
    get_participant,
    list_participants,
    update_participant,
)

from .certificates import (  # noqa: F401
    certificate_status,
    check_participant_status,
    create_certificate,
    delete_certificate,
    get_certificate,
    list_certificates,
    update_certificate,
    verify_certificate,
)

from .contacts import (  # noqa: F401
    CONTACT_STATUSES,
    create_contact,
    delete_contact,
    get_contact,
    list_contacts,
    update_contact_status,
)

from .config import (  # noqa: F401
    get_config,
    update_config,
)
