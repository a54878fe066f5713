"""create schools and teachers

Revision ID: 4b1e0c7d9a21
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""
import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = '4b1e0c7d9a21'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'schools',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_schools')),
    )
    op.create_index('ix_schools_name', 'schools', ['name'])

    op.create_table(
        'teachers',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('subject', sa.String(length=100), nullable=True),
        sa.Column('school_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(
            ['school_id'], ['schools.id'], name=op.f('fk_teachers_school_id_schools')
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_teachers')),
        sa.UniqueConstraint('email', name='uq_teachers_email'),
    )
    op.create_index('ix_teachers_school_id', 'teachers', ['school_id'])


def downgrade():
    op.drop_index('ix_teachers_school_id', table_name='teachers')
    op.drop_table('teachers')
    op.drop_index('ix_schools_name', table_name='schools')
    op.drop_table('schools')
