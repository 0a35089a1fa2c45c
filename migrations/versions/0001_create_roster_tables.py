"""create roster tables

Revision ID: 0001_create_roster_tables
Revises:
Create Date: 2026-01-05 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_create_roster_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'schools',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('school_id', sa.String(20), nullable=False),
        sa.Column('school_name', sa.String(200), nullable=False),
        sa.Column('address', sa.String(200)),
        sa.Column('suburb', sa.String(100)),
        sa.Column('town', sa.String(100)),
        sa.Column('postcode', sa.String(20)),
        sa.Column('phone', sa.String(40)),
        sa.Column('email', sa.String(120)),
        sa.Column('website', sa.String(256)),
        sa.Column('principal', sa.String(120)),
        sa.Column('school_type', sa.String(100)),
        sa.Column('authority', sa.String(100)),
        sa.Column('decile', sa.Integer()),
        sa.Column('roll_number', sa.Integer()),
        sa.Column('gender', sa.String(40)),
        sa.Column('is_primary', sa.Boolean()),
        sa.Column('is_secondary', sa.Boolean()),
        sa.Column('is_composite', sa.Boolean()),
        sa.Column('org_code', sa.String(20)),
        sa.Column('takiwa', sa.String(100)),
        sa.Column('local_body', sa.String(100)),
    )
    op.create_index('ix_schools_school_id', 'schools', ['school_id'], unique=True)

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(64), nullable=False),
        sa.Column('username', sa.String(50), unique=True),
        sa.Column('email', sa.String(120), unique=True),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('last_login', sa.DateTime()),
    )
    op.create_index('ix_users_user_id', 'users', ['user_id'], unique=True)

    op.create_table(
        'user_schools',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False),
        sa.Column('school_id', sa.String(20), nullable=False),
        sa.Column('added_at', sa.DateTime()),
        sa.Column('notes', sa.Text()),
        sa.UniqueConstraint('user_id', 'school_id', name='uq_user_school'),
    )
    op.create_index('ix_user_schools_user_id', 'user_schools', ['user_id'])
    op.create_index('ix_user_schools_school_id', 'user_schools', ['school_id'])

    op.create_table(
        'students',
        sa.Column('student_id', sa.String(32), primary_key=True),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(150), nullable=False),
        sa.Column('level', sa.String(20), nullable=False),
        sa.Column('ethnicity', sa.String(10), nullable=False),
        sa.Column('gender', sa.String(20), nullable=False),
        sa.Column('nsn', sa.String(9), nullable=False, unique=True),
        sa.Column('language', sa.String(10)),
        sa.Column('created_at', sa.DateTime()),
    )

    op.create_table(
        'groups',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('group_id', sa.String(36), nullable=False, unique=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False),
        sa.Column('school_id', sa.String(20), nullable=False),
        sa.Column('group_name', sa.String(100), nullable=False),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
        sa.UniqueConstraint('user_id', 'school_id', 'group_name', name='uq_group_user_school_name'),
    )
    op.create_index('ix_groups_user_id', 'groups', ['user_id'])
    op.create_index('ix_groups_school_id', 'groups', ['school_id'])
    op.create_index('idx_groups_user_school', 'groups', ['user_id', 'school_id'])

    op.create_table(
        'group_students',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('group_id', sa.Integer(), sa.ForeignKey('groups.id', ondelete='CASCADE'), nullable=False),
        sa.Column('student_id', sa.String(32), sa.ForeignKey('students.student_id', ondelete='CASCADE'), nullable=False),
        sa.Column('added_at', sa.DateTime()),
        sa.UniqueConstraint('group_id', 'student_id', name='uq_group_student'),
    )
    op.create_index('ix_group_students_group_id', 'group_students', ['group_id'])
    op.create_index('ix_group_students_student_id', 'group_students', ['student_id'])


def downgrade():
    op.drop_table('group_students')
    op.drop_table('groups')
    op.drop_table('students')
    op.drop_table('user_schools')
    op.drop_table('users')
    op.drop_table('schools')
