"""
Pytest configuration and shared fixtures.

Provides a test application, database session, and test client that
all test modules can use. Uses the ``testing`` configuration, which
points at an in-memory SQLite database.
"""

import pytest

from employee_directory import create_app
from employee_directory.extensions import db as _db
from employee_directory.models.employee import Department, Employee


@pytest.fixture(scope="session")
def app():
    """
    Create a Flask application configured for testing.

    The app is created once per test session.
    """
    app = create_app("testing")

    # Establish an application context for the entire test session.
    with app.app_context():
        yield app


@pytest.fixture(scope="session")
def database(app):  # pylint: disable=redefined-outer-name
    """Provide the SQLAlchemy database instance."""
    yield _db


@pytest.fixture(scope="function")
def db_session(database):  # pylint: disable=redefined-outer-name
    """
    Provide a clean database session for each test function.

    Tables are created before the test and dropped afterwards, so
    every test starts from an empty employee table.
    """
    database.create_all()

    yield database.session

    database.session.rollback()
    database.session.remove()
    database.drop_all()


@pytest.fixture(scope="function")
def client(app, db_session):  # pylint: disable=redefined-outer-name,unused-argument
    """
    Provide a Flask test client for making HTTP requests.

    Usage in tests::

        def test_health(client):
            response = client.get("/health")
            assert response.status_code == 200
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def make_employee(db_session):  # pylint: disable=redefined-outer-name
    """
    Factory fixture that inserts an employee and returns it.

    Usage::

        emp = make_employee("John Doe", Department.CSE, 50000.0)
    """

    def _make(name, department=Department.CSE, salary=50000.0, reports_to=None):
        employee = Employee(
            name=name,
            department=department,
            salary=salary,
            reports_to=reports_to,
        )
        db_session.add(employee)
        db_session.commit()
        return employee

    return _make
