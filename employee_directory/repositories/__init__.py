"""
Repository package.

Repositories are the only layer that talks to the SQLAlchemy session.
Services import them as needed::

    from employee_directory.repositories import EmployeeRepository
"""

from employee_directory.repositories.base import CrudRepository  # noqa: F401
from employee_directory.repositories.employee import EmployeeRepository  # noqa: F401
