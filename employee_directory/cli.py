"""
Custom Flask CLI commands.

These commands are registered with the app via ``register_commands()``
in the application factory. Run them with ``flask <command_name>``.

Usage::

    flask db-check         # Verify database connectivity and schema
    flask seed-employees   # Insert sample employees into an empty table
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from employee_directory.extensions import db
from employee_directory.models.employee import Department, Employee
from employee_directory.services import employee_service

# Sample rows for ``flask seed-employees``.  reports_to uses the
# position in this list (1-based), which matches the generated ids
# on a fresh table.
SAMPLE_EMPLOYEES = [
    ("John Doe", Department.CSE, 50000.0, None),
    ("Jane Smith", Department.CSE, 60000.0, 1),
    ("Bob Johnson", Department.IT, 45000.0, 1),
    ("Priya Raman", Department.ECE, 52000.0, None),
    ("Arjun Mehta", Department.MECH, 48000.0, 4),
]


@click.command("db-check")
@with_appcontext
def db_check_command():
    """
    Verify database connectivity and confirm the employee table exists.

    Prints the configured database URI, runs a trivial query and
    reports how many employee rows are stored.
    """
    click.echo("=" * 60)
    click.echo("  Employee Directory — Database Connectivity Check")
    click.echo("=" * 60)

    db_uri = current_app.config["SQLALCHEMY_DATABASE_URI"]
    click.echo(f"\n  Connection string: {db_uri}\n")

    # -- Step 1: Basic connectivity ----------------------------------------
    click.echo("[1/2] Testing connection...")
    try:
        db.session.execute(db.text("SELECT 1"))
        click.secho("      ✓ Connected successfully.", fg="green")
    except SQLAlchemyError as exc:
        click.secho(f"      ✗ Connection failed: {exc}", fg="red")
        click.echo("\n  Is DATABASE_URL set correctly in the environment?")
        return

    # -- Step 2: Schema ----------------------------------------------------
    click.echo("[2/2] Checking employee table...")
    if not inspect(db.engine).has_table(Employee.__tablename__):
        click.secho("      ✗ Table 'employee' not found.", fg="red")
        click.echo("        Have you run 'flask db upgrade'?")
        return

    count = len(employee_service.get_all_employees())
    click.secho(f"      ✓ Table 'employee' has {count} row(s).", fg="green")

    click.echo("\n" + "=" * 60)
    click.secho("  All checks passed. Database is ready.", fg="green", bold=True)
    click.echo("=" * 60)


@click.command("seed-employees")
@with_appcontext
def seed_employees_command():
    """Insert sample employees if the employee table is empty."""
    if employee_service.get_all_employees():
        click.echo("Employees already exist. Skipping seed.")
        return

    for name, department, salary, reports_to in SAMPLE_EMPLOYEES:
        employee_service.save_employee(
            Employee(
                name=name,
                department=department,
                salary=salary,
                reports_to=reports_to,
            )
        )

    click.secho(f"Seeded {len(SAMPLE_EMPLOYEES)} employees.", fg="green")


def register_commands(app):
    """Register all custom CLI commands with the Flask application."""
    app.cli.add_command(db_check_command)
    app.cli.add_command(seed_employees_command)
