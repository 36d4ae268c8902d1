"""
Routes for the employee blueprint.

Each view maps one HTTP verb/path onto one employee_service call and
turns the result into a status code.  The only logic here is the
existence check that precedes update and delete.
"""

from flask import abort, jsonify, request

from employee_directory.blueprints.employee import bp
from employee_directory.decorators import json_body_required
from employee_directory.services import employee_service


def _employee_list(employees):
    return jsonify([employee.to_dict() for employee in employees])


# =========================================================================
# CRUD
# =========================================================================


@bp.route("/all", methods=["GET"])
def get_all_employees():
    """Return every employee."""
    return _employee_list(employee_service.get_all_employees()), 200


@bp.route("/<int(max=9223372036854775807):employee_id>", methods=["GET"])
def get_employee_by_id(employee_id):
    """
    Return one employee, or 404.

    Ids beyond the signed 64-bit range do not match the route and
    also give 404.
    """
    employee = employee_service.get_employee_by_id(employee_id)
    if employee is None:
        abort(404, description=f"No employee found with ID: {employee_id}")
    return employee.to_dict(), 200


@bp.route("/save", methods=["POST"])
@json_body_required
def save_employee():
    """Create (or overwrite, when ``id`` is given) an employee."""
    try:
        employee = employee_service.employee_from_payload(request.get_json())
    except ValueError as exc:
        abort(400, description=str(exc))

    saved = employee_service.save_employee(employee)
    return saved.to_dict(), 201


@bp.route("/<int(max=9223372036854775807):employee_id>", methods=["PUT"])
@json_body_required
def update_employee(employee_id):
    """
    Overwrite an existing employee.

    The path id wins over any ``id`` in the body.  Returns 404 if the
    employee does not exist.
    """
    if employee_service.get_employee_by_id(employee_id) is None:
        abort(404, description=f"No employee found with ID: {employee_id}")

    try:
        employee = employee_service.employee_from_payload(
            request.get_json(), employee_id=employee_id
        )
    except ValueError as exc:
        abort(400, description=str(exc))

    updated = employee_service.save_employee(employee)
    return updated.to_dict(), 200


@bp.route("/<int(max=9223372036854775807):employee_id>", methods=["DELETE"])
def delete_employee_by_id(employee_id):
    """Delete an employee: 204 on success, 404 if it does not exist."""
    if employee_service.get_employee_by_id(employee_id) is None:
        abort(404, description=f"No employee found with ID: {employee_id}")

    employee_service.delete_employee_by_id(employee_id)
    return "", 204


# =========================================================================
# Aggregations
# =========================================================================


@bp.route("/department/<department>", methods=["GET"])
def get_employees_by_department(department):
    """Return employees in one department.  Unknown departments give 400."""
    try:
        dept = employee_service.parse_department(department)
    except ValueError as exc:
        abort(400, description=str(exc))

    return _employee_list(employee_service.get_employees_by_department(dept)), 200


@bp.route("/average-salary", methods=["GET"])
def calculate_average_salary():
    """Return the mean salary as a bare JSON number (0.0 when empty)."""
    return jsonify(employee_service.calculate_average_salary()), 200


@bp.route("/sorted-by-salary", methods=["GET"])
def get_employees_sorted_by_salary_descending():
    """Return all employees, highest salary first."""
    employees = employee_service.get_employees_sorted_by_salary_descending()
    return _employee_list(employees), 200


@bp.route("/update-salaries/<percentage_increase>", methods=["PUT"])
def update_employee_salaries(percentage_increase):
    """
    Apply a percentage change to every salary.

    The path segment is parsed here rather than with Flask's ``float``
    converter, which rejects negatives and whole numbers like ``10``.
    """
    try:
        percentage = employee_service.parse_percentage(percentage_increase)
    except ValueError as exc:
        abort(400, description=str(exc))

    employee_service.update_employee_salaries(percentage)
    return "", 200


@bp.route("/highest-paid", methods=["GET"])
def find_highest_paid_employee():
    """Return the highest-paid employee, or 404 when there are none."""
    employee = employee_service.find_highest_paid_employee()
    if employee is None:
        abort(404, description="No employees found.")
    return employee.to_dict(), 200


@bp.route("/count-by-department", methods=["GET"])
def count_employees_by_department():
    """Return a ``{department: count}`` mapping."""
    counts = employee_service.count_employees_by_department()
    return {department.value: count for department, count in counts.items()}, 200
