"""
Ticket model issued for an event.

Key design decisions:
- Unique constraint on (event_id, code): codes repeat across events, never within one
- ON DELETE RESTRICT: an event with tickets cannot disappear underneath them
- `used` flips false -> true through a conditional UPDATE, never back
"""

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, UniqueConstraint, false
from sqlalchemy.orm import relationship

from eventhub.db.base import Base, TimestampMixin


class Ticket(Base, TimestampMixin):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(255), nullable=False)
    owner = Column(String(255), nullable=False)
    event_id = Column(
        Integer,
        ForeignKey("events.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    used = Column(Boolean, nullable=False, default=False, server_default=false())

    # Relationships
    event = relationship("Event", back_populates="tickets")

    __table_args__ = (
        UniqueConstraint("event_id", "code", name="uq_tickets_event_code"),
    )

    def __repr__(self) -> str:
        return f"<Ticket(id={self.id}, event={self.event_id}, code={self.code}, used={self.used})>"
