"""create_users_rooms_videos

Revision ID: 3f1a9c2d7b10
Revises:
Create Date: 2026-10-17 09:30:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1a9c2d7b10'
down_revision = None
branch_labels = None
depends_on = None

LIVE = sa.text('deleted_at IS NULL')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(50), nullable=False),
        sa.Column('email', sa.String(100), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', sa.Enum('USER', 'MANAGER', 'SUPERVISOR', name='role'), nullable=False),
        sa.Column('is_active', sa.Boolean, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True)),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_users_deleted_at', 'users', ['deleted_at'])
    # Natural keys are unique among live rows only
    op.create_index('uq_users_username_live', 'users', ['username'], unique=True,
                    sqlite_where=LIVE, postgresql_where=LIVE)
    op.create_index('uq_users_email_live', 'users', ['email'], unique=True,
                    sqlite_where=LIVE, postgresql_where=LIVE)

    op.create_table(
        'rooms',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('room_number', sa.String(20), nullable=False),
        sa.Column('is_active', sa.Boolean, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True)),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_rooms_deleted_at', 'rooms', ['deleted_at'])
    op.create_index('uq_rooms_room_number_live', 'rooms', ['room_number'], unique=True,
                    sqlite_where=LIVE, postgresql_where=LIVE)

    op.create_table(
        'videos',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('filename', sa.String(255), nullable=False),
        sa.Column('original_filename', sa.String(255), nullable=False),
        sa.Column('file_path', sa.String(500), nullable=False),
        sa.Column('file_size', sa.BigInteger, nullable=False),
        sa.Column('duration', sa.Float, nullable=True),
        sa.Column('room_id', sa.Integer, sa.ForeignKey('rooms.id'), nullable=True),
        sa.Column('uploaded_by', sa.Integer, sa.ForeignKey('users.id'), nullable=False),
        sa.Column('upload_date', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('video_metadata', sa.JSON, nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True)),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_videos_room_id', 'videos', ['room_id'])
    op.create_index('ix_videos_uploaded_by', 'videos', ['uploaded_by'])
    op.create_index('ix_videos_deleted_at', 'videos', ['deleted_at'])


def downgrade() -> None:
    # Drop videos first (foreign key dependency)
    op.drop_index('ix_videos_deleted_at', 'videos')
    op.drop_index('ix_videos_uploaded_by', 'videos')
    op.drop_index('ix_videos_room_id', 'videos')
    op.drop_table('videos')

    op.drop_index('uq_rooms_room_number_live', 'rooms')
    op.drop_index('ix_rooms_deleted_at', 'rooms')
    op.drop_table('rooms')

    op.drop_index('uq_users_email_live', 'users')
    op.drop_index('uq_users_username_live', 'users')
    op.drop_index('ix_users_deleted_at', 'users')
    op.drop_table('users')
    sa.Enum(name='role').drop(op.get_bind(), checkfirst=True)
