"""ORM model for to-do tasks owned by a user."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, String, Text

from tasktrack.models.base import Base, new_id, utcnow


class Task(Base):
    """
    One to-do item. user_id is set at creation and never changes.

    priority: 'Low', 'Medium' or 'High'
    """

    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    deadline = Column(Date, nullable=True, index=True)
    priority = Column(String(16), nullable=False, index=True)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
