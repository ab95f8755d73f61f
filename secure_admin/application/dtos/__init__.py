"""Application DTOs shared across layers."""

from secure_admin.application.dtos.admin_record import AdminRecordModel

__all__: list[str] = ["AdminRecordModel"]
