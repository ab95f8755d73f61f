"""API layer for secure-admin.

Message shapes for hosts that exchange admin requests and responses as
JSON. Transport is the host's concern; this layer only decodes requests
into domain requests and encodes AdminView snapshots.

IMPORT RULES:
- CAN import from: application, domain
"""
