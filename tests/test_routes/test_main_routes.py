"""
Smoke tests for the main blueprint routes and the JSON error handlers.

These verify that the application starts up correctly, the health
check endpoint responds, and failures render JSON bodies.
"""

from sqlalchemy.exc import OperationalError

from employee_directory.extensions import db
from employee_directory.models.employee import Department, Employee
from employee_directory.services import employee_service


class TestHealthCheck:
    """Tests for the health check endpoint."""

    def test_health_check_returns_200(self, client):
        """The health check should return HTTP 200 with a healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.get_json() == {
            "status": "healthy",
            "database": "connected",
        }

    def test_health_check_returns_503_when_database_fails(self, client, monkeypatch):
        """A failing database query reports unhealthy with HTTP 503."""

        def failing_execute(*args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("database is down"))

        monkeypatch.setattr(db.session, "execute", failing_execute)

        response = client.get("/health")

        assert response.status_code == 503
        body = response.get_json()
        assert body["status"] == "unhealthy"
        assert "database is down" in body["database"]

    def test_unknown_route_returns_json_404(self, client):
        """Routing misses should render the JSON error body."""
        response = client.get("/no-such-page")
        assert response.status_code == 404
        assert response.get_json()["error"] == "Not Found"


class TestInternalServerError:
    """Unhandled exceptions inside a view."""

    def test_unhandled_error_returns_json_500(self, app, client, monkeypatch):
        """The 500 body is JSON and does not leak the exception text."""
        monkeypatch.setitem(app.config, "PROPAGATE_EXCEPTIONS", False)

        def broken():
            raise RuntimeError("secret internals")

        monkeypatch.setattr(employee_service, "get_all_employees", broken)

        response = client.get("/api/v1/employee/all")

        assert response.status_code == 500
        assert response.get_json() == {
            "error": "Internal Server Error",
            "message": "An unexpected error occurred.",
        }

    def test_unhandled_error_rolls_back_session(self, app, client, monkeypatch):
        """Pending changes from the failed request are discarded."""
        monkeypatch.setitem(app.config, "PROPAGATE_EXCEPTIONS", False)

        def broken():
            db.session.add(
                Employee(name="Half Done", department=Department.IT, salary=1.0)
            )
            raise RuntimeError("failed after adding a row")

        monkeypatch.setattr(employee_service, "get_all_employees", broken)

        response = client.get("/api/v1/employee/all")
        monkeypatch.undo()

        assert response.status_code == 500
        assert not db.session.new
        assert employee_service.get_all_employees() == []
