"""Application layer for secure-admin: ports and services."""
