"""
Infrastructure layer - Concrete adapters for secure-admin.

This layer contains:
- In-memory admin store (JSON-serialized records, per-namespace locking)
- Canonical identity validator
- Stubs for tests
- Structured logging configuration

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
