"""
Employee model and the closed set of departments.

The ``employee`` table is the only table in the application.
``reports_to`` is a plain integer column, not a foreign key: it may
reference a missing row or form a cycle, and nothing here checks it.
"""

import enum

from employee_directory.extensions import db


class Department(str, enum.Enum):
    """Departments an employee can belong to.  Stored by name."""

    CSE = "CSE"
    IT = "IT"
    ECE = "ECE"
    EEE = "EEE"
    MECH = "MECH"
    CIVIL = "CIVIL"


class Employee(db.Model):
    """A single employee record."""

    __tablename__ = "employee"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.Text, nullable=True)
    department = db.Column(
        db.Enum(
            Department,
            name="department",
            native_enum=False,
            length=20,
            validate_strings=True,
        ),
        nullable=False,
    )
    salary = db.Column(db.Float, nullable=False)
    reports_to = db.Column(db.Integer, nullable=True)

    def to_dict(self) -> dict:
        """Return the JSON wire representation (camelCase ``reportsTo``)."""
        return {
            "id": self.id,
            "name": self.name,
            "department": self.department.value,
            "salary": self.salary,
            "reportsTo": self.reports_to,
        }

    def __repr__(self) -> str:
        return f"<Employee {self.id}: {self.name} ({self.department.value})>"
