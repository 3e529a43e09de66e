from alembic import op
import sqlalchemy as sa

revision = "0001_skills_matrix_tables"
down_revision = None
branch_labels = None
depends_on = None

def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    ]

def upgrade():
    # Owned by the login service
    op.create_table(
        'users',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('email', sa.String(255), nullable=True, unique=True),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('profile_image_url', sa.String(500), nullable=True),
        sa.Column('role', sa.String(20), nullable=False, server_default='employee'),
        *_timestamps(),
    )

    op.create_table(
        'sessions',
        sa.Column('sid', sa.String(128), primary_key=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('expire', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_sessions_expire', 'sessions', ['expire'])

    op.create_table(
        'skills',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(100), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        'positions',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('department', sa.String(100), nullable=True),
        sa.Column('level', sa.String(50), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        'employees',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('position_id', sa.Integer, sa.ForeignKey('positions.id'), nullable=True),
        sa.Column('department', sa.String(100), nullable=True),
        sa.Column('hire_date', sa.Date(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_employees_position_id', 'employees', ['position_id'])

    op.create_table(
        'position_skills',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('position_id', sa.Integer, sa.ForeignKey('positions.id'), nullable=False),
        sa.Column('skill_id', sa.Integer, sa.ForeignKey('skills.id'), nullable=False),
        sa.Column('required_level', sa.Integer, nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('position_id', 'skill_id', name='uq_position_skill'),
    )
    op.create_index('ix_position_skills_position_id', 'position_skills', ['position_id'])
    op.create_index('ix_position_skills_skill_id', 'position_skills', ['skill_id'])

    op.create_table(
        'employee_skills',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('employee_id', sa.Integer, sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('skill_id', sa.Integer, sa.ForeignKey('skills.id'), nullable=False),
        sa.Column('current_level', sa.Integer, nullable=False),
        sa.Column('evaluated_by', sa.String(64), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('evaluation_date', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_employee_skills_employee_id', 'employee_skills', ['employee_id'])
    op.create_index('ix_employee_skills_skill_id', 'employee_skills', ['skill_id'])


def downgrade():
    op.drop_table('employee_skills')
    op.drop_table('position_skills')
    op.drop_table('employees')
    op.drop_table('positions')
    op.drop_table('skills')
    op.drop_index('ix_sessions_expire', table_name='sessions')
    op.drop_table('sessions')
    op.drop_table('users')
