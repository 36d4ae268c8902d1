"""
Tests for the custom Flask CLI commands (flask seed-employees, flask db-check).
"""

from employee_directory.cli import SAMPLE_EMPLOYEES
from employee_directory.services import employee_service


class TestSeedEmployees:
    """flask seed-employees"""

    def test_seeds_empty_table(self, app, db_session):
        """An empty table receives every sample employee."""
        result = app.test_cli_runner().invoke(args=["seed-employees"])

        assert result.exit_code == 0
        assert f"Seeded {len(SAMPLE_EMPLOYEES)} employees." in result.output
        names = [employee.name for employee in employee_service.get_all_employees()]
        assert names == [name for name, _, _, _ in SAMPLE_EMPLOYEES]

    def test_skips_when_table_has_rows(self, app, make_employee):
        """Existing data is never mixed with sample rows."""
        make_employee("John Doe")

        result = app.test_cli_runner().invoke(args=["seed-employees"])

        assert result.exit_code == 0
        assert "Skipping seed" in result.output
        assert len(employee_service.get_all_employees()) == 1


class TestDbCheck:
    """flask db-check"""

    def test_reports_connection_and_row_count(self, app, make_employee):
        """Both checks pass and the current row count is printed."""
        make_employee("John Doe")
        make_employee("Jane Smith")

        result = app.test_cli_runner().invoke(args=["db-check"])

        assert result.exit_code == 0
        assert "Connected successfully" in result.output
        assert "Table 'employee' has 2 row(s)." in result.output
        assert "All checks passed" in result.output

    def test_reports_missing_table(self, app, database):
        """Without the schema the check stops and suggests migrating."""
        result = app.test_cli_runner().invoke(args=["db-check"])

        assert result.exit_code == 0
        assert "Table 'employee' not found" in result.output
        assert "All checks passed" not in result.output
