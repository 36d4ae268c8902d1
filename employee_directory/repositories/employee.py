"""Employee repository."""

from employee_directory.models.employee import Employee
from employee_directory.repositories.base import CrudRepository


class EmployeeRepository(CrudRepository[Employee]):
    """CRUD persistence for :class:`Employee` rows."""

    model = Employee
