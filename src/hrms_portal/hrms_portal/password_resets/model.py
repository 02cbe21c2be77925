from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import RequestStatus


@dataclass(frozen=True)
class PasswordResetRequest:
    """An employee's "forgot password" request waiting for HR."""

    request_id: str
    user_id: str
    name: str
    email: str
    role: str
    department: str
    designation: str
    status: RequestStatus
    created_at: datetime

    def as_row(self) -> dict:
        return {
            "id": self.request_id,
            "user_id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "department": self.department,
            "designation": self.designation,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
        }
