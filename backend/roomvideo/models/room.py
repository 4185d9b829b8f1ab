"""Room model."""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Index, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from roomvideo.database import Base


class Room(Base):
    """Physical room that videos are filed under."""
    __tablename__ = "rooms"
    __table_args__ = (
        Index(
            "uq_rooms_room_number_live",
            "room_number",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    room_number = Column(String(20), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    # Relationships
    videos = relationship("Video", back_populates="room")

    def __repr__(self):
        return f"<Room(id={self.id}, room_number={self.room_number})>"
