"""
secure-admin - Two-step, revocable admin role transfer

A single privileged "admin" role guards one persisted record. The role
moves between identities only through an explicit propose/accept
handshake, a pending proposal can be withdrawn by the current admin, and
the role can be abolished forever.

Layers:
- domain: identities, the persisted record, the tagged state and errors
- application: storage/validator ports and the SecureAdminService
- infrastructure: in-memory adapters, test stubs, structured logging
- api: pydantic message shapes for hosts that speak JSON
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
