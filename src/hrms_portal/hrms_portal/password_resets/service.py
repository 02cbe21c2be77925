from __future__ import annotations

import logging

from ..common.validators import require_min_length
from ..core.constants import MIN_RESET_PASSWORD_LENGTH
from ..core.enums import RequestStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .repository import PasswordResetRepository

logger = logging.getLogger(__name__)

ADMIN_ROLES = frozenset({Role.HR, Role.ADMIN})


class PasswordResetService:
    """Use case: HR handles employees' password-reset requests."""

    def __init__(self, requests: PasswordResetRepository):
        self._requests = requests

    def list_rows(self) -> list[dict]:
        return [r.as_row() for r in self._requests.list_requests()]

    def reset_password(self, *, current_role: Role, request_id: str, new_password: str) -> None:
        if current_role not in ADMIN_ROLES:
            raise AuthorizationError("You are not allowed to reset passwords")
        if not new_password:
            raise ValidationError("Please enter a password")
        require_min_length(new_password, "Password", MIN_RESET_PASSWORD_LENGTH)

        req = self._requests.get(str(request_id))
        if not req:
            raise NotFoundError("Password reset request not found")

        if not self._requests.reset_password(user_id=req.user_id, new_password=new_password):
            raise ValidationError("Failed to reset password")
        self._requests.set_status(request_id=req.request_id, status=RequestStatus.APPROVED)
        logger.info("Password reset for user %s (request %s)", req.user_id, req.request_id)

    def delete_request(self, *, current_role: Role, request_id: str) -> None:
        if current_role not in ADMIN_ROLES:
            raise AuthorizationError("You are not allowed to delete reset requests")
        if not self._requests.delete(str(request_id)):
            raise NotFoundError("Password reset request not found")
        logger.info("Password reset request %s deleted", request_id)
