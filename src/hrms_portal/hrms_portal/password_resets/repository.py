from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import PasswordResetRequest


class PasswordResetRepository(Protocol):
    def list_requests(self) -> Sequence[PasswordResetRequest]:
        raise NotImplementedError

    def get(self, request_id: str) -> Optional[PasswordResetRequest]:
        raise NotImplementedError

    def reset_password(self, *, user_id: str, new_password: str) -> bool:
        raise NotImplementedError

    def set_status(self, *, request_id: str, status: RequestStatus) -> bool:
        raise NotImplementedError

    def delete(self, request_id: str) -> bool:
        raise NotImplementedError
