"""LogEntry database model."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, UniqueConstraint

from skill_tracker.database import Base


class LogEntry(Base):
    """
    LogEntry model recording one practice-time submission for a skill.

    Attributes:
        id: Primary key
        skill_id: Foreign key to skills table
        position: Chronological index of the entry within its skill's history
        timestamp: When the time was logged (stored as naive UTC)
        hours_added: Hours added by this entry
        total_hours: Skill total immediately after this entry
    """

    __tablename__ = "log_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    skill_id = Column(Integer, ForeignKey("skills.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    timestamp = Column(DateTime, nullable=False)
    hours_added = Column(Float, nullable=False)
    total_hours = Column(Float, nullable=False)

    __table_args__ = (UniqueConstraint("skill_id", "position", name="_skill_position_uc"),)

    def __repr__(self) -> str:
        """String representation of LogEntry."""
        return (
            f"<LogEntry(id={self.id}, skill_id={self.skill_id}, "
            f"hours_added={self.hours_added}, total_hours={self.total_hours})>"
        )
