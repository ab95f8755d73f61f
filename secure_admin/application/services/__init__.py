"""Application services - Use case orchestration.

Available services:
- SecureAdminService: Two-step, revocable admin role state machine
"""

from secure_admin.application.services.secure_admin_service import (
    SecureAdminService,
)

__all__: list[str] = ["SecureAdminService"]
