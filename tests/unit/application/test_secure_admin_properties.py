"""Property-based tests for SecureAdminService.

A hypothesis rule-based state machine drives random sequences of
initialize/update calls from random callers against a simple reference
model, and checks after every step that:
- the view matches the model exactly (None stays None)
- the stored record satisfies the record invariants
- rejected operations leave the stored bytes untouched
- abolition is terminal
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from hypothesis import settings
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from secure_admin.application.services.secure_admin_service import (
    SecureAdminService,
)
from secure_admin.domain.errors import (
    AdminRoleAbolishedError,
    AlreadyInitializedError,
    IdentityValidationError,
    NotAdminError,
    NotProposedAdminError,
)
from secure_admin.domain.exceptions import SecureAdminError
from secure_admin.domain.models import (
    AbolishAdminRole,
    AcceptProposed,
    AdminView,
    ClearProposed,
    Identity,
    ProposeNewAdmin,
    SetInitialAdmin,
)
from secure_admin.infrastructure.adapters import (
    CanonicalIdentityValidator,
    InMemoryAdminStore,
)

NAMESPACE = "xyz"

identities = st.sampled_from(["peter", "miles", "doc_oc", "gwen"])
malformed = st.sampled_from(["", "Peter", " miles", "a", "doc oc", "gw€n"])


class SecureAdminMachine(RuleBasedStateMachine):
    """Reference-model state machine for the admin role."""

    def __init__(self) -> None:
        super().__init__()
        self.store = InMemoryAdminStore()
        self.service = SecureAdminService(
            namespace=NAMESPACE,
            store=self.store,
            validator=CanonicalIdentityValidator(),
        )
        self.abolished = False
        self.admin: str | None = None
        self.proposed: str | None = None

    def _expect_failure(
        self, error_type: type[SecureAdminError], action: Callable[[], object]
    ) -> None:
        before = self.store.raw(NAMESPACE)
        with pytest.raises(error_type):
            action()
        assert self.store.raw(NAMESPACE) == before

    # ------------------------------------------------------------------
    # initialize
    # ------------------------------------------------------------------

    @rule(raw=identities)
    def set_initial_admin(self, raw: str) -> None:
        request = SetInitialAdmin(admin=raw)
        if self.abolished:
            self._expect_failure(
                AdminRoleAbolishedError, lambda: self.service.initialize(request)
            )
        elif self.admin is not None:
            self._expect_failure(
                AlreadyInitializedError, lambda: self.service.initialize(request)
            )
        else:
            self.service.initialize(request)
            self.admin = raw

    @rule(raw=malformed)
    def set_malformed_initial_admin(self, raw: str) -> None:
        request = SetInitialAdmin(admin=raw)
        if self.abolished:
            expected: type[SecureAdminError] = AdminRoleAbolishedError
        elif self.admin is not None:
            expected = AlreadyInitializedError
        else:
            expected = IdentityValidationError
        self._expect_failure(expected, lambda: self.service.initialize(request))

    @rule()
    def abolish_on_init(self) -> None:
        if self.abolished:
            self._expect_failure(
                AdminRoleAbolishedError,
                lambda: self.service.initialize(AbolishAdminRole()),
            )
        elif self.admin is not None:
            self._expect_failure(
                AlreadyInitializedError,
                lambda: self.service.initialize(AbolishAdminRole()),
            )
        else:
            self.service.initialize(AbolishAdminRole())
            self.abolished = True

    # ------------------------------------------------------------------
    # update
    # ------------------------------------------------------------------

    @rule(sender=identities, raw=identities)
    def propose(self, sender: str, raw: str) -> None:
        action = lambda: self.service.update(  # noqa: E731
            Identity(sender), ProposeNewAdmin(proposed=raw)
        )
        if self.abolished:
            self._expect_failure(AdminRoleAbolishedError, action)
        elif sender != self.admin:
            self._expect_failure(NotAdminError, action)
        else:
            action()
            self.proposed = raw

    @rule(sender=identities, raw=malformed)
    def propose_malformed(self, sender: str, raw: str) -> None:
        action = lambda: self.service.update(  # noqa: E731
            Identity(sender), ProposeNewAdmin(proposed=raw)
        )
        if self.abolished:
            self._expect_failure(AdminRoleAbolishedError, action)
        elif sender != self.admin:
            self._expect_failure(NotAdminError, action)
        else:
            self._expect_failure(IdentityValidationError, action)

    @rule(sender=identities)
    def clear(self, sender: str) -> None:
        action = lambda: self.service.update(Identity(sender), ClearProposed())  # noqa: E731
        if self.abolished:
            self._expect_failure(AdminRoleAbolishedError, action)
        elif sender != self.admin:
            self._expect_failure(NotAdminError, action)
        else:
            action()
            self.proposed = None

    @rule(sender=identities)
    def accept(self, sender: str) -> None:
        action = lambda: self.service.update(Identity(sender), AcceptProposed())  # noqa: E731
        if self.abolished:
            self._expect_failure(AdminRoleAbolishedError, action)
        elif sender != self.proposed:
            self._expect_failure(NotProposedAdminError, action)
        else:
            action()
            self.admin = sender
            self.proposed = None

    @rule(sender=identities)
    def abolish(self, sender: str) -> None:
        action = lambda: self.service.update(Identity(sender), AbolishAdminRole())  # noqa: E731
        if self.abolished:
            self._expect_failure(AdminRoleAbolishedError, action)
        elif sender != self.admin:
            self._expect_failure(NotAdminError, action)
        else:
            action()
            self.abolished = True
            self.admin = None
            self.proposed = None

    # ------------------------------------------------------------------
    # invariants
    # ------------------------------------------------------------------

    @invariant()
    def view_matches_model(self) -> None:
        assert self.service.view() == AdminView(admin=self.admin, proposed=self.proposed)
        assert self.service.is_abolished() is self.abolished

    @invariant()
    def record_invariants_hold(self) -> None:
        record = self.store.get(NAMESPACE)
        if record is None:
            assert not self.abolished and self.admin is None
            return
        if record.abolished:
            assert record.admin is None and record.proposed is None
        if record.proposed is not None:
            assert record.admin is not None


SecureAdminMachine.TestCase.settings = settings(
    max_examples=75, stateful_step_count=25, deadline=None
)
TestSecureAdminMachine = SecureAdminMachine.TestCase
