"""
Event model.

Key design decisions:
- Unique constraint on `name`: the service pre-check alone cannot stop two
  concurrent inserts, the constraint can
- `date` is timezone-aware and always written in UTC
"""

from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship

from eventhub.db.base import Base, TimestampMixin


class Event(Base, TimestampMixin):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    tickets = relationship("Ticket", back_populates="event", passive_deletes=True)

    __table_args__ = (
        UniqueConstraint("name", name="uq_events_name"),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, name={self.name}, date={self.date})>"
