"""User model."""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum, Index, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from roomvideo.database import Base
from roomvideo.models.enums import Role


class User(Base):
    """User model."""
    __tablename__ = "users"
    __table_args__ = (
        # Natural keys are only unique among live rows
        Index(
            "uq_users_username_live",
            "username",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
        Index(
            "uq_users_email_live",
            "email",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False)
    email = Column(String(100), nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(Enum(Role), nullable=False, default=Role.USER)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    # Relationships
    uploaded_videos = relationship("Video", back_populates="uploader", foreign_keys="Video.uploaded_by")

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, role={self.role})>"
