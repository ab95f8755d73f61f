"""
Pytest configuration and shared fixtures for secure-admin tests.

Testing Standards:
- Unit tests go in tests/unit/
- Services are exercised against the stubs in
  secure_admin.infrastructure.stubs unless a test targets an adapter
"""

from __future__ import annotations

import pytest

from secure_admin.application.services.secure_admin_service import (
    SecureAdminService,
)
from secure_admin.domain.models.identity import Identity
from secure_admin.infrastructure.stubs import AdminStoreStub, IdentityValidatorStub

NAMESPACE = "xyz"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from secure_admin import __version__

    return __version__


@pytest.fixture
def store() -> AdminStoreStub:
    """Create an empty admin store stub."""
    return AdminStoreStub()


@pytest.fixture
def validator() -> IdentityValidatorStub:
    """Create a permissive identity validator stub."""
    return IdentityValidatorStub()


@pytest.fixture
def admin(store: AdminStoreStub, validator: IdentityValidatorStub) -> SecureAdminService:
    """Create a service over the stubs, namespaced "xyz"."""
    return SecureAdminService(namespace=NAMESPACE, store=store, validator=validator)


@pytest.fixture
def peter() -> Identity:
    return Identity.unchecked("peter_parker")


@pytest.fixture
def miles() -> Identity:
    return Identity.unchecked("miles")


@pytest.fixture
def doc_oc() -> Identity:
    return Identity.unchecked("doc_oc")
