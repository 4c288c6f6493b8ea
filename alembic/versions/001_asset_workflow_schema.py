"""asset workflow schema

Revision ID: 001_asset_workflow_schema
Revises: 
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_asset_workflow_schema'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table('departments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('code', sa.String(length=20), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_index('ix_departments_code', 'departments', ['code'], unique=True)

    op.create_table('projects',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )

    op.create_table('employees',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('contact_number', sa.String(length=30), nullable=True),
        sa.Column('designation', sa.String(length=150), nullable=True),
        sa.Column('role', sa.Enum('EMPLOYEE', 'TEAM_LEAD', 'MANAGEMENT', name='employeerole'), nullable=False),
        sa.Column('department_id', sa.Integer(), sa.ForeignKey('departments.id'), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_employees_email', 'employees', ['email'], unique=True)
    op.create_index('ix_employees_department_id', 'employees', ['department_id'])

    op.create_table('employee_projects',
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id', ondelete='CASCADE'), primary_key=True),
    )

    op.create_table('teams',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('department_id', sa.Integer(), sa.ForeignKey('departments.id'), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_teams_department_id', 'teams', ['department_id'])

    op.create_table('employee_teams',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id', ondelete='CASCADE'), nullable=False),
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('teams.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('employee_id'),
    )
    op.create_index('ix_employee_teams_team_id', 'employee_teams', ['team_id'])

    op.create_table('team_leads',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id', ondelete='CASCADE'), nullable=False),
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('teams.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.Enum('ACTIVE', 'INACTIVE', name='teamleadstatus'), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('employee_id', 'team_id', name='uq_team_leads_employee_team'),
    )
    op.create_index('ix_team_leads_employee_id', 'team_leads', ['employee_id'])
    op.create_index('ix_team_leads_team_id', 'team_leads', ['team_id'])

    op.create_table('assets',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('asset_type', sa.String(length=100), nullable=False),
        sa.Column('brand', sa.String(length=100), nullable=True),
        sa.Column('model', sa.String(length=100), nullable=True),
        sa.Column('specifications', sa.Text(), nullable=True),
        sa.Column('serial_number', sa.String(length=100), nullable=False),
        sa.Column('purchase_date', sa.Date(), nullable=True),
        sa.Column('vendor', sa.String(length=150), nullable=True),
        sa.Column('warranty_expiry', sa.Date(), nullable=True),
        sa.Column('status', sa.Enum('AVAILABLE', 'REQUESTED', 'ASSIGNED', 'REPAIR', 'RETIRED', name='assetstatus'), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='1'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('quantity >= 0', name='ck_assets_quantity_non_negative'),
    )
    op.create_index('ix_assets_asset_type', 'assets', ['asset_type'])
    op.create_index('ix_assets_serial_number', 'assets', ['serial_number'], unique=True)

    op.create_table('asset_requests',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('requester_id', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('asset_id', sa.Integer(), sa.ForeignKey('assets.id'), nullable=False),
        sa.Column('request_type', sa.Enum('EMPLOYEE', 'MANAGEMENT', name='requesttype'), nullable=False),
        sa.Column('request_status', sa.Enum('PENDING', 'APPROVED', 'REJECTED', 'ISSUED', name='requeststatus'), nullable=False),
        sa.Column('request_date', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_asset_requests_requester_id', 'asset_requests', ['requester_id'])
    op.create_index('ix_asset_requests_asset_id', 'asset_requests', ['asset_id'])
    op.create_index('ix_asset_requests_request_status', 'asset_requests', ['request_status'])

    op.create_table('asset_request_approvals',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('request_id', sa.Integer(), sa.ForeignKey('asset_requests.id', ondelete='CASCADE'), nullable=False),
        sa.Column('approver_id', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('approval_level', sa.Enum('TEAM_LEAD', 'IT', name='approvallevel'), nullable=False),
        sa.Column('approval_status', sa.Enum('PENDING', 'APPROVED', 'REJECTED', name='approvalstatus'), nullable=False),
        sa.Column('remarks', sa.Text(), nullable=True),
        sa.Column('approval_date', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('request_id', 'approval_level', name='uq_asset_request_approvals_level'),
    )
    op.create_index('ix_asset_request_approvals_request_id', 'asset_request_approvals', ['request_id'])
    op.create_index('ix_asset_request_approvals_approver_id', 'asset_request_approvals', ['approver_id'])

    op.create_table('asset_issues',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('request_id', sa.Integer(), sa.ForeignKey('asset_requests.id'), nullable=False),
        sa.Column('asset_id', sa.Integer(), sa.ForeignKey('assets.id'), nullable=False),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('issue_date', sa.Date(), nullable=False),
        sa.Column('quantity_issued', sa.Integer(), nullable=False, server_default='1'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('request_id'),
    )
    op.create_index('ix_asset_issues_asset_id', 'asset_issues', ['asset_id'])
    op.create_index('ix_asset_issues_employee_id', 'asset_issues', ['employee_id'])

    op.create_table('audit_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('action_type', sa.Enum('REQUEST', 'APPROVE', 'REJECT', 'ISSUE', name='auditaction'), nullable=False),
        sa.Column('request_id', sa.Integer(), sa.ForeignKey('asset_requests.id'), nullable=False),
        sa.Column('performed_by', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_audit_logs_request_id', 'audit_logs', ['request_id'])
    op.create_index('ix_audit_logs_timestamp', 'audit_logs', ['timestamp'])


def downgrade() -> None:
    for table in (
        'audit_logs', 'asset_issues', 'asset_request_approvals', 'asset_requests',
        'assets', 'team_leads', 'employee_teams', 'teams', 'employee_projects',
        'employees', 'projects', 'departments',
    ):
        op.drop_table(table)

    bind = op.get_bind()
    for enum_name in (
        'auditaction', 'approvalstatus', 'approvallevel', 'requeststatus',
        'requesttype', 'assetstatus', 'teamleadstatus', 'employeerole',
    ):
        sa.Enum(name=enum_name).drop(bind, checkfirst=True)
