"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('users',
        sa.Column('id', sa.String(length=36), nullable=False, comment='User ID (UUID)'),
        sa.Column('email', sa.String(length=255), nullable=False, comment='User email address'),
        sa.Column('role', sa.Enum('admin', 'user', name='user_role_enum', native_enum=False), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=True, comment='Argon2 password hash'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('users', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_users_email'), ['email'], unique=True)

    op.create_table('invite_tokens',
        sa.Column('id', sa.String(length=36), nullable=False, comment='Invite ID (UUID)'),
        sa.Column('email', sa.String(length=255), nullable=False, comment='Invitee email address, empty for generic invites'),
        sa.Column('token', sa.String(length=128), nullable=False, comment='Secure random token for accepting the invite'),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False, comment='Timestamp when the invite expires'),
        sa.Column('consumed_at', sa.DateTime(timezone=True), nullable=True, comment='Timestamp when the invite was consumed'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_by_id', sa.String(length=36), nullable=False, comment='Foreign key to users table (creating admin)'),
        sa.ForeignKeyConstraint(['created_by_id'], ['users.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('invite_tokens', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_invite_tokens_token'), ['token'], unique=True)
        batch_op.create_index(batch_op.f('ix_invite_tokens_created_by_id'), ['created_by_id'], unique=False)
        batch_op.create_index('ix_invite_tokens_created_at', ['created_at'], unique=False)
        batch_op.create_index('ix_invite_tokens_expires_at', ['expires_at'], unique=False)

    op.create_table('profiles',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('display_name', sa.String(length=100), nullable=False),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('hobbies', sa.JSON(), nullable=False),
        sa.Column('social_links', sa.JSON(), nullable=True),
        sa.Column('avatar_url', sa.String(length=2048), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('profiles', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_profiles_user_id'), ['user_id'], unique=True)
        batch_op.create_index(batch_op.f('ix_profiles_is_public'), ['is_public'], unique=False)

    op.create_table('notes',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('talent_user_id', sa.String(length=36), nullable=False),
        sa.Column('admin_user_id', sa.String(length=36), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['admin_user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['talent_user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('notes', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_notes_admin_user_id'), ['admin_user_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_notes_talent_user_id'), ['talent_user_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table('notes', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_notes_talent_user_id'))
        batch_op.drop_index(batch_op.f('ix_notes_admin_user_id'))
    op.drop_table('notes')

    with op.batch_alter_table('profiles', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_profiles_is_public'))
        batch_op.drop_index(batch_op.f('ix_profiles_user_id'))
    op.drop_table('profiles')

    with op.batch_alter_table('invite_tokens', schema=None) as batch_op:
        batch_op.drop_index('ix_invite_tokens_expires_at')
        batch_op.drop_index('ix_invite_tokens_created_at')
        batch_op.drop_index(batch_op.f('ix_invite_tokens_created_by_id'))
        batch_op.drop_index(batch_op.f('ix_invite_tokens_token'))
    op.drop_table('invite_tokens')

    with op.batch_alter_table('users', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_users_email'))
    op.drop_table('users')
