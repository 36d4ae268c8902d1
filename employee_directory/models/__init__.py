"""
Model package — imports all models so Alembic and SQLAlchemy can
discover them automatically when ``flask db`` commands are run.
"""

from employee_directory.models.employee import Department, Employee  # noqa: F401
