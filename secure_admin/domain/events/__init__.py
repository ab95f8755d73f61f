"""Domain events for secure-admin."""

from secure_admin.domain.events.admin import (
    ADMIN_UPDATED_ACTION,
    NONE_ATTRIBUTE,
    AdminUpdatedEventPayload,
)

__all__: list[str] = [
    "ADMIN_UPDATED_ACTION",
    "NONE_ATTRIBUTE",
    "AdminUpdatedEventPayload",
]
