"""create entry exit schema

Revision ID: 5c1e9a7d2b40
Revises:
Create Date: 2026-10-19 09:12:44.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5c1e9a7d2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'schools',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('timezone', sa.String(), nullable=True),
    )
    op.create_index('ix_schools_id', 'schools', ['id'])

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('role', sa.Enum('admin', 'staff', name='user_role'), nullable=False),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('school_id', sa.Integer(), sa.ForeignKey('schools.id', ondelete='CASCADE'), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_school_id', 'users', ['school_id'])

    op.create_table(
        'students',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('school_id', sa.Integer(), sa.ForeignKey('schools.id', ondelete='CASCADE'), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('student_number', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index('ix_students_id', 'students', ['id'])
    op.create_index('ix_students_school_id', 'students', ['school_id'])
    op.create_index('ix_students_first_name', 'students', ['first_name'])
    op.create_index('ix_students_last_name', 'students', ['last_name'])
    op.create_index('ix_students_student_number', 'students', ['student_number'])

    op.create_table(
        'staff',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('school_id', sa.Integer(), sa.ForeignKey('schools.id', ondelete='CASCADE'), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('designation', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index('ix_staff_id', 'staff', ['id'])
    op.create_index('ix_staff_school_id', 'staff', ['school_id'])

    op.create_table(
        'checkpoints',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('school_id', sa.Integer(), sa.ForeignKey('schools.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('mode', sa.Enum('entry', 'exit', 'both', name='checkpoint_mode'), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('created_by', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
    )
    op.create_index('ix_checkpoints_id', 'checkpoints', ['id'])
    op.create_index('ix_checkpoints_school_id', 'checkpoints', ['school_id'])

    op.create_table(
        'checkpoint_authorized_times',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('checkpoint_id', sa.Integer(), sa.ForeignKey('checkpoints.id', ondelete='CASCADE'), nullable=False),
        sa.Column('day_of_week', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint('day_of_week BETWEEN 0 AND 6', name='ck_cat_day_of_week'),
        sa.CheckConstraint('start_time < end_time', name='ck_cat_window_order'),
    )
    op.create_index('ix_checkpoint_authorized_times_id', 'checkpoint_authorized_times', ['id'])
    op.create_index('ix_checkpoint_authorized_times_checkpoint_id', 'checkpoint_authorized_times', ['checkpoint_id'])
    op.create_index('ix_cat_checkpoint_day', 'checkpoint_authorized_times', ['checkpoint_id', 'day_of_week'])

    op.create_table(
        'entry_exit_records',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('school_id', sa.Integer(), sa.ForeignKey('schools.id', ondelete='CASCADE'), nullable=False),
        sa.Column('checkpoint_id', sa.Integer(), sa.ForeignKey('checkpoints.id', ondelete='CASCADE'), nullable=False),
        sa.Column('person_id', sa.Integer(), nullable=False),
        sa.Column('person_type', sa.Enum('STUDENT', 'STAFF', name='person_type'), nullable=False),
        sa.Column('record_type', sa.Enum('ENTRY', 'EXIT', name='record_type'), nullable=False),
        sa.Column(
            'status',
            sa.Enum('authorized', 'late', 'unauthorized', name='entry_status'),
            nullable=False,
            server_default='authorized',
        ),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('recorded_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_entry_exit_records_id', 'entry_exit_records', ['id'])
    op.create_index('ix_entry_exit_records_school_id', 'entry_exit_records', ['school_id'])
    op.create_index('ix_entry_exit_records_checkpoint_id', 'entry_exit_records', ['checkpoint_id'])
    op.create_index('ix_entry_exit_records_person_id', 'entry_exit_records', ['person_id'])
    op.create_index('ix_entry_exit_records_recorded_at', 'entry_exit_records', ['recorded_at'])
    op.create_index('ix_eer_school_recorded', 'entry_exit_records', ['school_id', 'recorded_at'])

    op.create_table(
        'evening_leaves',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('school_id', sa.Integer(), sa.ForeignKey('schools.id', ondelete='CASCADE'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id', ondelete='CASCADE'), nullable=False),
        sa.Column('checkpoint_id', sa.Integer(), sa.ForeignKey('checkpoints.id', ondelete='SET NULL'), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('days_of_week', sa.JSON(), nullable=False),
        sa.Column('authorized_return_time', sa.Time(), nullable=False),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('created_by', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.CheckConstraint('start_date <= end_date', name='ck_el_date_range'),
    )
    op.create_index('ix_evening_leaves_id', 'evening_leaves', ['id'])
    op.create_index('ix_evening_leaves_school_id', 'evening_leaves', ['school_id'])
    op.create_index('ix_evening_leaves_student_id', 'evening_leaves', ['student_id'])
    op.create_index('ix_el_active', 'evening_leaves', ['school_id', 'is_active', 'start_date', 'end_date'])

    op.create_table(
        'package_deliveries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('school_id', sa.Integer(), sa.ForeignKey('schools.id', ondelete='CASCADE'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id', ondelete='CASCADE'), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('sender', sa.String(), nullable=True),
        sa.Column(
            'status',
            sa.Enum('pending', 'collected', name='package_status'),
            nullable=False,
            server_default='pending',
        ),
        sa.Column('received_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('collected_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_package_deliveries_id', 'package_deliveries', ['id'])
    op.create_index('ix_package_deliveries_school_id', 'package_deliveries', ['school_id'])
    op.create_index('ix_package_deliveries_student_id', 'package_deliveries', ['student_id'])

    op.create_table(
        'student_checkpoint_notes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('school_id', sa.Integer(), sa.ForeignKey('schools.id', ondelete='CASCADE'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id', ondelete='CASCADE'), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('created_by', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.UniqueConstraint('school_id', 'student_id', name='uq_note_school_student'),
    )
    op.create_index('ix_student_checkpoint_notes_id', 'student_checkpoint_notes', ['id'])
    op.create_index('ix_student_checkpoint_notes_student_id', 'student_checkpoint_notes', ['student_id'])


def downgrade() -> None:
    op.drop_table('student_checkpoint_notes')
    op.drop_table('package_deliveries')
    op.drop_table('evening_leaves')
    op.drop_table('entry_exit_records')
    op.drop_table('checkpoint_authorized_times')
    op.drop_table('checkpoints')
    op.drop_table('staff')
    op.drop_table('students')
    op.drop_table('users')
    op.drop_table('schools')
