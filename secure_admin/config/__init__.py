"""Configuration module for secure-admin.

Available Configurations:
- SecureAdminConfig: Namespace, identity rules and log environment
"""

from secure_admin.config.admin_config import (
    DEFAULT_SECURE_ADMIN_CONFIG,
    TEST_SECURE_ADMIN_CONFIG,
    SecureAdminConfig,
)

__all__ = [
    "SecureAdminConfig",
    "DEFAULT_SECURE_ADMIN_CONFIG",
    "TEST_SECURE_ADMIN_CONFIG",
]
