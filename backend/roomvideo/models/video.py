"""Video model."""
from sqlalchemy import Column, String, BigInteger, Float, ForeignKey, DateTime, Integer, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from roomvideo.database import Base


class Video(Base):
    """Uploaded video file and its metadata."""
    __tablename__ = "videos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(String(255), nullable=False)
    original_filename = Column(String(255), nullable=False)
    file_path = Column(String(500), nullable=False)
    file_size = Column(BigInteger, nullable=False)
    duration = Column(Float, nullable=True)  # Duration in seconds
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=True, index=True)
    uploaded_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    upload_date = Column(DateTime(timezone=True), server_default=func.now())
    video_metadata = Column(JSON, default=dict)  # Renamed from 'metadata' to avoid SQLAlchemy conflict
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    # Relationships
    room = relationship("Room", back_populates="videos")
    uploader = relationship("User", back_populates="uploaded_videos", foreign_keys=[uploaded_by])

    def __repr__(self):
        return f"<Video(id={self.id}, filename={self.filename}, room_id={self.room_id})>"
