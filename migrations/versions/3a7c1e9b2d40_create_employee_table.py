"""Create employee table

Single table holding every employee record.  ``department`` is stored
as its name in a VARCHAR; ``reports_to`` is deliberately not a foreign
key.

Revision ID: 3a7c1e9b2d40
Revises:
Create Date: 2026-10-19 09:12:04.518311

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3a7c1e9b2d40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    """Create the employee table."""
    op.create_table(
        "employee",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column(
            "department",
            sa.Enum(
                "CSE",
                "IT",
                "ECE",
                "EEE",
                "MECH",
                "CIVIL",
                name="department",
                native_enum=False,
                length=20,
            ),
            nullable=False,
        ),
        sa.Column("salary", sa.Float(), nullable=False),
        sa.Column("reports_to", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade():
    """Drop the employee table."""
    op.drop_table("employee")
