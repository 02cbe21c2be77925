"""Demo data for the in-memory backend (used when no HR API is configured)."""
from __future__ import annotations

from datetime import date, datetime, time

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus, EmployeeStatus, HolidayType, LeaveType, RequestStatus, Role
from ..directory.model import Employee
from ..holidays.model import Holiday
from ..leaves.model import BalanceBucket, LeaveBalance, LeaveRequest
from ..password_resets.model import PasswordResetRequest

EMPLOYEES = (
    Employee("1", "EMP001", "John Doe", "john.doe@company.com", "+1-555-0123", "Engineering",
             "Senior Developer", "Sarah Johnson", EmployeeStatus.ACTIVE, date(2023, 1, 15), Role.EMPLOYEE,
             "123 Main St, Springfield, IL"),
    Employee("2", "EMP002", "Sarah Johnson", "sarah.johnson@company.com", "+1-555-0125", "Engineering",
             "Engineering Manager", "", EmployeeStatus.ACTIVE, date(2022, 3, 10), Role.MANAGER,
             "456 Oak Ave, Springfield, IL"),
    Employee("3", "EMP003", "Mike Wilson", "mike.wilson@company.com", "+1-555-0127", "Human Resources",
             "HR Manager", "", EmployeeStatus.ACTIVE, date(2021, 7, 20), Role.HR,
             "789 Pine St, Springfield, IL"),
    Employee("4", "EMP004", "Alice Admin", "alice.admin@company.com", "+1-555-0129", "Administration",
             "System Administrator", "", EmployeeStatus.ACTIVE, date(2020, 11, 5), Role.ADMIN,
             "321 Elm St, Springfield, IL"),
    Employee("5", "EMP005", "Emily Chen", "emily.chen@company.com", "+1-555-0131", "Marketing",
             "Marketing Specialist", "Mike Wilson", EmployeeStatus.ACTIVE, date(2023, 6, 1), Role.EMPLOYEE,
             "654 Maple Dr, Springfield, IL"),
    Employee("6", "EMP006", "Raj Patel", "raj.patel@company.com", "+1-555-0133", "Finance",
             "Accountant", "Alice Admin", EmployeeStatus.INACTIVE, date(2019, 2, 11), Role.EMPLOYEE,
             "12 Birch Rd, Springfield, IL"),
)

ATTENDANCE = (
    AttendanceRecord("1", "1", "John Doe", date(2024, 1, 15), AttendanceStatus.PRESENT, time(9, 0), time(18, 0), 8.0),
    AttendanceRecord("2", "1", "John Doe", date(2024, 1, 16), AttendanceStatus.PRESENT, time(9, 15), time(17, 45), 7.5),
    AttendanceRecord("3", "1", "John Doe", date(2024, 1, 17), AttendanceStatus.LEAVE),
    AttendanceRecord("4", "2", "Sarah Johnson", date(2024, 1, 15), AttendanceStatus.PRESENT, time(8, 45), time(18, 15), 8.5),
    AttendanceRecord("5", "5", "Emily Chen", date(2024, 2, 1), AttendanceStatus.HALF_DAY, time(9, 0), time(13, 0), 4.0),
)

HOLIDAYS = (
    Holiday("1", "New Year's Day", date(2024, 1, 1), "National", HolidayType.NATIONAL, "Public holiday for New Year"),
    Holiday("2", "Independence Day", date(2024, 7, 4), "National", HolidayType.NATIONAL, "Independence Day celebration"),
    Holiday("3", "Labor Day", date(2024, 9, 2), "National", HolidayType.NATIONAL, "Labor Day holiday"),
    Holiday("4", "Christmas Day", date(2024, 12, 25), "National", HolidayType.NATIONAL, "Christmas celebration"),
    Holiday("5", "Regional Festival", date(2024, 3, 15), "West", HolidayType.OPTIONAL, "Optional regional festival"),
)

LEAVES = (
    LeaveRequest("1", "1", "John Doe", LeaveType.CASUAL, date(2024, 1, 17), date(2024, 1, 17), 1,
                 "Family function", RequestStatus.APPROVED, date(2024, 1, 10), "Sarah Johnson", date(2024, 1, 11)),
    LeaveRequest("2", "5", "Emily Chen", LeaveType.SICK, date(2024, 2, 5), date(2024, 2, 7), 3,
                 "Fever and doctor's advice to rest", RequestStatus.PENDING, date(2024, 2, 4)),
    LeaveRequest("3", "1", "John Doe", LeaveType.EARNED, date(2024, 3, 11), date(2024, 3, 15), 5,
                 "Vacation", RequestStatus.PENDING, date(2024, 2, 20)),
)

BALANCES = (
    LeaveBalance("1", "John Doe", BalanceBucket(12, 2, 10), BalanceBucket(7, 0, 7), BalanceBucket(18, 5, 13)),
    LeaveBalance("2", "Sarah Johnson", BalanceBucket(15, 3, 12), BalanceBucket(10, 1, 9), BalanceBucket(21, 8, 13)),
    LeaveBalance("5", "Emily Chen", BalanceBucket(12, 1, 11), BalanceBucket(7, 3, 4), BalanceBucket(15, 2, 13)),
)

PASSWORD_RESETS = (
    PasswordResetRequest("1", "5", "Emily Chen", "emily.chen@company.com", "employee", "Marketing",
                         "Marketing Specialist", RequestStatus.PENDING, datetime(2024, 2, 2, 10, 30)),
    PasswordResetRequest("2", "1", "John Doe", "john.doe@company.com", "employee", "Engineering",
                         "Senior Developer", RequestStatus.PENDING, datetime(2024, 2, 3, 9, 5)),
)
