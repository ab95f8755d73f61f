"""Domain errors for secure-admin.

Every failure a caller can observe has its own type so clients can tell
"wrong caller" apart from "wrong state" and "malformed input". All errors
inherit from SecureAdminError.
"""

from secure_admin.domain.errors.admin import (
    AdminRoleAbolishedError,
    AlreadyInitializedError,
    NotAdminError,
    NotProposedAdminError,
    UnsupportedAdminRequestError,
)
from secure_admin.domain.errors.identity import IdentityValidationError
from secure_admin.domain.errors.storage import InvalidAdminRecordError, StorageError

__all__: list[str] = [
    "AdminRoleAbolishedError",
    "AlreadyInitializedError",
    "IdentityValidationError",
    "InvalidAdminRecordError",
    "NotAdminError",
    "NotProposedAdminError",
    "StorageError",
    "UnsupportedAdminRequestError",
]
