"""
Employee service — CRUD and in-memory aggregations over employees.

Every function re-reads from the repository; nothing is cached between
calls.  Aggregations (department filter, average, sort, maximum,
counts) load the full table and work on the resulting list.

"Not found" is reported as ``None``, never as an exception.  Payload
helpers raise ``ValueError`` with a message suitable for a 400 response.
"""

import logging
import math
from collections import Counter
from typing import Any

from employee_directory.models.employee import Department, Employee
from employee_directory.repositories import EmployeeRepository

logger = logging.getLogger(__name__)

# Integer keys must fit a signed 64-bit column.
MIN_IDENTIFIER = -(2**63)
MAX_IDENTIFIER = 2**63 - 1


def _repository() -> EmployeeRepository:
    return EmployeeRepository()


# -- CRUD ------------------------------------------------------------------


def get_all_employees() -> list[Employee]:
    """Return every employee in storage order."""
    return _repository().find_all()


def get_employee_by_id(employee_id: int) -> Employee | None:
    """Return an employee by primary key, or None if not found."""
    return _repository().find_by_id(employee_id)


def save_employee(employee: Employee) -> Employee:
    """
    Insert or update an employee.

    An employee without an ``id`` is inserted and receives a generated
    key.  An employee with an ``id`` overwrites the stored row.

    Returns:
        The persisted Employee.
    """
    is_new = employee.id is None
    saved = _repository().save(employee)
    logger.info(
        "%s employee %d (%s)",
        "Created" if is_new else "Saved",
        saved.id,
        saved.department.value,
    )
    return saved


def delete_employee_by_id(employee_id: int) -> None:
    """Delete an employee.  Deleting a missing id does nothing."""
    if _repository().delete_by_id(employee_id):
        logger.info("Deleted employee %d", employee_id)


# -- Aggregations ----------------------------------------------------------


def get_employees_by_department(department: Department) -> list[Employee]:
    """Return employees in ``department``, keeping storage order."""
    return [
        employee
        for employee in _repository().find_all()
        if employee.department == department
    ]


def calculate_average_salary() -> float:
    """
    Return the mean salary across all employees.

    Returns 0.0 when there are no employees.
    """
    salaries = [employee.salary for employee in _repository().find_all()]
    if not salaries:
        return 0.0
    return sum(salaries) / len(salaries)


def get_employees_sorted_by_salary_descending() -> list[Employee]:
    """
    Return all employees ordered by salary, highest first.

    ``sorted`` is stable, so equal salaries keep storage order.
    """
    return sorted(
        _repository().find_all(),
        key=lambda employee: employee.salary,
        reverse=True,
    )


def update_employee_salaries(percentage_increase: float) -> None:
    """
    Apply a percentage change to every employee's salary.

    ``new_salary = salary * (1 + percentage_increase / 100)``.  Negative
    percentages reduce salaries.  Each row is saved individually inside
    one transaction; any failure rolls back the whole batch.
    """
    repository = _repository()
    factor = 1 + percentage_increase / 100

    try:
        employees = repository.find_all()
        for employee in employees:
            employee.salary = employee.salary * factor
            repository.save(employee, commit=False)
        repository.commit()

        logger.info(
            "Applied %s%% salary change to %d employees",
            percentage_increase,
            len(employees),
        )

    except Exception:
        # Roll back so the session is usable for the error response.
        repository.rollback()
        logger.exception(
            "Failed to apply %s%% salary change", percentage_increase
        )
        raise


def find_highest_paid_employee() -> Employee | None:
    """
    Return the employee with the highest salary, or None if there are
    no employees.  On a tie the first employee in storage order wins.
    """
    employees = _repository().find_all()
    if not employees:
        return None
    return max(employees, key=lambda employee: employee.salary)


def count_employees_by_department() -> dict[Department, int]:
    """
    Return the number of employees per department.

    Departments without employees are absent from the result.
    """
    return dict(
        Counter(employee.department for employee in _repository().find_all())
    )


# -- Payload parsing -------------------------------------------------------


def parse_department(value: Any) -> Department:
    """
    Convert a wire value to a :class:`Department`.

    Raises:
        ValueError: If the value is not one of the known departments.
    """
    try:
        return Department(value)
    except ValueError:
        valid = ", ".join(d.value for d in Department)
        raise ValueError(
            f"Unknown department '{value}'. Valid values: {valid}."
        ) from None


def parse_percentage(value: str) -> float:
    """
    Convert a path segment to a percentage.

    Any finite number is accepted, including negatives.

    Raises:
        ValueError: If the value is not a finite number.
    """
    try:
        percentage = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{value}' is not a valid percentage.") from None
    if not math.isfinite(percentage):
        raise ValueError(f"'{value}' is not a finite percentage.")
    return percentage


def _is_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a number here.
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_identifier(payload: dict, key: str) -> int | None:
    """Return an optional integer key that fits a BIGINT column."""
    value = payload.get(key)
    if value is None:
        return None
    if not _is_integer(value):
        raise ValueError(f"'{key}' must be an integer or null.")
    if not MIN_IDENTIFIER <= value <= MAX_IDENTIFIER:
        raise ValueError(f"'{key}' is out of range.")
    return value


def _parse_salary(value: Any) -> float:
    if not _is_number(value):
        raise ValueError("'salary' is required and must be a number.")
    try:
        salary = float(value)
    except OverflowError:
        raise ValueError("'salary' is out of range.") from None
    # json.loads accepts NaN and Infinity literals.
    if not math.isfinite(salary):
        raise ValueError("'salary' must be a finite number.")
    return salary


def employee_from_payload(
    payload: Any, employee_id: int | None = None
) -> Employee:
    """
    Build an unsaved Employee from a decoded JSON object.

    Args:
        payload:     Dict with ``department``, ``salary`` and optionally
                     ``id``, ``name`` and ``reportsTo``.
        employee_id: If given, overrides any ``id`` in the payload.

    Returns:
        A transient Employee ready for :func:`save_employee`.

    Raises:
        ValueError: If a field is missing, has the wrong type, or is
                    not a finite/in-range number.
    """
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object.")

    name = payload.get("name")
    if name is not None and not isinstance(name, str):
        raise ValueError("'name' must be a string or null.")

    if payload.get("department") is None:
        raise ValueError("'department' is required.")
    department = parse_department(payload["department"])

    salary = _parse_salary(payload.get("salary"))
    reports_to = _parse_identifier(payload, "reportsTo")

    if employee_id is None:
        employee_id = _parse_identifier(payload, "id")

    return Employee(
        id=employee_id,
        name=name,
        department=department,
        salary=salary,
        reports_to=reports_to,
    )
