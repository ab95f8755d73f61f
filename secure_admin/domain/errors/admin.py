"""Admin role transition errors.

These are raised by the role state machine when a guard rejects an
operation. None of them is retried; the persisted record is never touched
when one is raised.

Error kinds:
- Permission: NotAdminError, NotProposedAdminError (wrong caller)
- State: AlreadyInitializedError, AdminRoleAbolishedError (wrong state)
- Usage: UnsupportedAdminRequestError (unknown request object)
"""

from __future__ import annotations

from secure_admin.domain.exceptions import SecureAdminError


class NotAdminError(SecureAdminError):
    """Raised when the caller is not the current admin.

    Covers every admin-only request, including the case where no admin
    has been set yet.
    """

    code = "not_admin"

    def __init__(self) -> None:
        super().__init__("Caller is not admin")


class NotProposedAdminError(SecureAdminError):
    """Raised when the caller is not the currently proposed admin.

    Also raised when nothing is proposed, since an empty proposal never
    matches any caller.
    """

    code = "not_proposed_admin"

    def __init__(self) -> None:
        super().__init__("Caller is not the proposed admin")


class AlreadyInitializedError(SecureAdminError):
    """Raised when initialize is called after an admin has been set."""

    code = "already_initialized"

    def __init__(self) -> None:
        super().__init__("Admin state was already initialized")


class AdminRoleAbolishedError(SecureAdminError):
    """Raised for any operation attempted after the role was abolished.

    Abolition is permanent. There is no request that can undo it.
    """

    code = "admin_role_abolished"

    def __init__(self) -> None:
        super().__init__("The admin role is abolished. No further updates possible.")


class UnsupportedAdminRequestError(SecureAdminError):
    """Raised when an operation receives a request of an unknown kind.

    Attributes:
        operation: The operation that rejected the request.
        request_type: Name of the offending request's type.
    """

    code = "unsupported_request"

    def __init__(self, operation: str, request: object) -> None:
        self.operation = operation
        self.request_type = type(request).__name__
        super().__init__(
            f"Unsupported request for {operation}: {self.request_type}"
        )
