"""Secure admin service - two-step, revocable admin role state machine.

This service owns one admin record per namespace and is the only writer
of that namespace. Control of the role moves in two steps so it can never
be handed to an unreachable or mistyped identity:

1. The current admin proposes a successor (ProposeNewAdmin)
2. The successor accepts with their own identity (AcceptProposed)

Until acceptance the admin keeps full control and may withdraw the
proposal (ClearProposed) or overwrite it. In every state the admin (or,
during initialize, anyone) can abolish the role forever.

State Diagram:
    Uninitialized --SetInitialAdmin--> Owned(A)
    Uninitialized --AbolishAdminRole--> Abolished
    Owned(A) --ProposeNewAdmin(A)--> OwnedWithProposal(A, P)
    Owned(A) --AbolishAdminRole(A)--> Abolished
    OwnedWithProposal(A, P) --ClearProposed(A)--> Owned(A)
    OwnedWithProposal(A, P) --AcceptProposed(P)--> Owned(P)
    OwnedWithProposal(A, P) --ProposeNewAdmin(A)--> OwnedWithProposal(A, P')
    OwnedWithProposal(A, P) --AbolishAdminRole(A)--> Abolished
    Abolished: terminal

Guarantees:
- Abolished is checked before anything else on every mutation
- A rejected operation never writes the record
- Validator and store errors propagate unchanged

Usage:
    service = SecureAdminService(
        namespace="admin",
        store=InMemoryAdminStore(),
        validator=CanonicalIdentityValidator(),
    )
    service.initialize(SetInitialAdmin(admin="peter"))
    service.update(Identity.unchecked("peter"), ProposeNewAdmin(proposed="miles"))
    service.update(Identity.unchecked("miles"), AcceptProposed())
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from secure_admin.application.services.base import LoggingMixin
from secure_admin.domain.errors.admin import (
    AdminRoleAbolishedError,
    AlreadyInitializedError,
    NotAdminError,
    NotProposedAdminError,
    UnsupportedAdminRequestError,
)
from secure_admin.domain.errors.storage import StorageError
from secure_admin.domain.events.admin import AdminUpdatedEventPayload
from secure_admin.domain.exceptions import SecureAdminError
from secure_admin.domain.models.admin_state import (
    Abolished,
    AdminState,
    Owned,
    OwnedWithProposal,
    state_from_record,
    state_to_record,
)
from secure_admin.domain.models.admin_view import AdminView
from secure_admin.domain.models.requests import (
    ADMIN_INIT_TYPES,
    ADMIN_UPDATE_TYPES,
    AbolishAdminRole,
    AcceptProposed,
    AdminInit,
    AdminUpdate,
    ClearProposed,
    ProposeNewAdmin,
    SetInitialAdmin,
)

if TYPE_CHECKING:
    import structlog

    from secure_admin.application.ports.admin_store import AdminStoreProtocol
    from secure_admin.application.ports.identity_validator import (
        IdentityValidatorProtocol,
    )
    from secure_admin.domain.models.identity import Identity


class SecureAdminService(LoggingMixin):
    """Admin role state machine bound to one storage namespace.

    Instances with different namespaces are fully independent, even when
    they share a store. The service holds no locks of its own; each
    mutation runs inside store.transaction(namespace).

    Attributes:
        namespace: Storage namespace of the admin record.
    """

    def __init__(
        self,
        namespace: str,
        store: AdminStoreProtocol,
        validator: IdentityValidatorProtocol,
    ) -> None:
        """Initialize the service.

        Args:
            namespace: Storage namespace of the admin record. Must be non-empty.
            store: Admin record storage.
            validator: Identity validator for raw identity strings.

        Raises:
            ValueError: If namespace is empty.
        """
        if not namespace:
            raise ValueError("namespace must be a non-empty string")
        self._namespace = namespace
        self._store = store
        self._validator = validator
        self._init_logger(namespace)

    @property
    def namespace(self) -> str:
        return self._namespace

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _load_state(self) -> AdminState:
        # A missing record is the uninitialized default
        return state_from_record(self._store.get(self._namespace))

    def current_admin(self) -> Identity | None:
        """Return the current admin, or None if uninitialized or abolished."""
        return self._load_state().admin

    def is_admin(self, identity: Identity) -> bool:
        """Return True if identity is the current admin."""
        admin = self.current_admin()
        return admin is not None and admin == identity

    def proposed_admin(self) -> Identity | None:
        """Return the pending proposed admin, or None."""
        return self._load_state().proposed

    def is_proposed(self, identity: Identity) -> bool:
        """Return True if identity is the pending proposed admin."""
        proposed = self.proposed_admin()
        return proposed is not None and proposed == identity

    def is_abolished(self) -> bool:
        """Return True once the role has been abolished (permanent)."""
        return self._load_state().is_abolished

    def view(self) -> AdminView:
        """Return the externally observable (admin, proposed) snapshot."""
        return _project(self._load_state())

    # ------------------------------------------------------------------
    # Assertions
    # ------------------------------------------------------------------

    def assert_admin(self, identity: Identity) -> None:
        """Raise unless identity is the current admin.

        Collaborators use this to gate their own privileged operations.

        Raises:
            NotAdminError: If identity is not the current admin.
        """
        if not self.is_admin(identity):
            raise NotAdminError()

    def assert_proposed(self, identity: Identity) -> None:
        """Raise unless identity is the pending proposed admin.

        Raises:
            NotProposedAdminError: If identity is not the proposed admin.
        """
        if not self.is_proposed(identity):
            raise NotProposedAdminError()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def initialize(self, request: AdminInit) -> AdminView:
        """Bootstrap the role. Any caller may initialize, first write wins.

        Args:
            request: SetInitialAdmin or AbolishAdminRole.

        Returns:
            The AdminView after initialization.

        Raises:
            UnsupportedAdminRequestError: If request is not an init request.
            AdminRoleAbolishedError: If the role was abolished.
            AlreadyInitializedError: If an admin is already set.
            IdentityValidationError: If the initial admin is malformed.
            StorageError: If the store fails.
        """
        if not isinstance(request, ADMIN_INIT_TYPES):
            raise UnsupportedAdminRequestError("initialize", request)

        log = self._log_request("initialize", request)

        try:
            with self._store.transaction(self._namespace):
                new_state = self._initial_state(self._load_state(), request)
                self._store.set(self._namespace, state_to_record(new_state))
        except SecureAdminError as exc:
            _log_rejection(log, "admin_init_rejected", exc)
            raise

        view = _project(new_state)
        log.info(
            "admin_initialized",
            admin=view.admin,
            abolished=new_state.is_abolished,
        )
        return view

    def update(
        self, sender: Identity, request: AdminUpdate
    ) -> AdminUpdatedEventPayload:
        """Apply a caller-gated update to the role.

        Args:
            sender: Authenticated identity of the caller.
            request: ProposeNewAdmin, ClearProposed, AcceptProposed or
                AbolishAdminRole.

        Returns:
            AdminUpdatedEventPayload attributing the resulting state to sender.

        Raises:
            UnsupportedAdminRequestError: If request is not an update request.
            AdminRoleAbolishedError: If the role was abolished.
            NotAdminError: If an admin-only request comes from a non-admin.
            NotProposedAdminError: If AcceptProposed comes from anyone but
                the proposed admin.
            IdentityValidationError: If the proposed admin is malformed.
            StorageError: If the store fails.
        """
        if not isinstance(request, ADMIN_UPDATE_TYPES):
            raise UnsupportedAdminRequestError("update", request)

        log = self._log_request("update", request, sender=sender)

        try:
            with self._store.transaction(self._namespace):
                new_state = self._next_state(self._load_state(), sender, request)
                self._store.set(self._namespace, state_to_record(new_state))
        except SecureAdminError as exc:
            _log_rejection(log, "admin_update_rejected", exc)
            raise

        event = AdminUpdatedEventPayload.create(
            namespace=self._namespace,
            request=request,
            state=new_state,
            sender=sender,
        )
        log.info("admin_updated", admin=event.admin, proposed=event.proposed)
        return event

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _initial_state(self, state: AdminState, request: AdminInit) -> AdminState:
        if isinstance(state, Abolished):
            raise AdminRoleAbolishedError()
        if state.admin is not None:
            raise AlreadyInitializedError()

        if isinstance(request, SetInitialAdmin):
            return Owned(admin=self._validator.validate(request.admin))
        return Abolished()

    def _next_state(
        self, state: AdminState, sender: Identity, request: AdminUpdate
    ) -> AdminState:
        if isinstance(state, Abolished):
            raise AdminRoleAbolishedError()

        if isinstance(request, ProposeNewAdmin):
            admin = _require_admin(state, sender)
            proposed = self._validator.validate(request.proposed)
            return OwnedWithProposal(admin=admin, proposed=proposed)

        if isinstance(request, ClearProposed):
            return Owned(admin=_require_admin(state, sender))

        if isinstance(request, AcceptProposed):
            if state.proposed is None or state.proposed != sender:
                raise NotProposedAdminError()
            # Already validated when it was proposed
            return Owned(admin=sender)

        if isinstance(request, AbolishAdminRole):
            _require_admin(state, sender)
            return Abolished()

        raise UnsupportedAdminRequestError("update", request)


def _require_admin(state: AdminState, sender: Identity) -> Identity:
    admin = state.admin
    if admin is None or admin != sender:
        raise NotAdminError()
    return admin


def _project(state: AdminState) -> AdminView:
    return AdminView(
        admin=str(state.admin) if state.admin is not None else None,
        proposed=str(state.proposed) if state.proposed is not None else None,
    )


def _log_rejection(
    log: structlog.BoundLogger, event: str, exc: SecureAdminError
) -> None:
    if isinstance(exc, StorageError):
        log.error(event, error=exc.code, message=exc.message)
    else:
        log.warning(event, error=exc.code, message=exc.message)
