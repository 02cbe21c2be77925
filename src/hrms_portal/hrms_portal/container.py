from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .api.client import HrApiClient
from .api.repositories import (
    ApiAttendanceRepository,
    ApiEmployeeRepository,
    ApiHolidayRepository,
    ApiLeaveRepository,
    ApiPasswordResetRepository,
)
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_API_TIMEOUT_SECONDS
from .directory.repository import EmployeeRepository
from .directory.service import EmployeeService
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .memory.repositories import seeded_repositories
from .password_resets.repository import PasswordResetRepository
from .password_resets.service import PasswordResetService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    backend: str

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    leaves_repo: LeaveRepository
    holidays_repo: HolidayRepository
    password_resets_repo: PasswordResetRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService
    holiday_service: HolidayService
    password_reset_service: PasswordResetService


def build_container(*, api_config: dict, session: Any = None) -> Container:
    """Wire repositories and services.

    An empty ``api_config["base_url"]`` selects the in-memory demo backend.
    """
    base_url = str(api_config.get("base_url") or "").strip()
    if base_url:
        client = HrApiClient(
            base_url,
            timeout=float(api_config.get("timeout") or DEFAULT_API_TIMEOUT_SECONDS),
            token=api_config.get("token") or None,
            session=session,
        )
        backend = f"api:{client.base_url}"
        repos = {
            "employees_repo": ApiEmployeeRepository(client),
            "attendance_repo": ApiAttendanceRepository(client),
            "leaves_repo": ApiLeaveRepository(client),
            "holidays_repo": ApiHolidayRepository(client),
            "password_resets_repo": ApiPasswordResetRepository(client),
        }
    else:
        backend = "memory"
        repos = seeded_repositories()
    logger.info("HR data backend: %s", backend)

    return Container(
        backend=backend,
        **repos,
        employee_service=EmployeeService(repos["employees_repo"]),
        attendance_service=AttendanceService(repos["attendance_repo"]),
        leave_service=LeaveService(repos["leaves_repo"]),
        holiday_service=HolidayService(repos["holidays_repo"]),
        password_reset_service=PasswordResetService(repos["password_resets_repo"]),
    )
