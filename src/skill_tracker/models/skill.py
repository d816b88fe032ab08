"""Skill database model."""

from sqlalchemy import Column, Float, Integer, String

from skill_tracker.database import Base


class Skill(Base):
    """
    Skill model holding one tracked skill and its running total.

    Attributes:
        id: Primary key, assigned by the ledger rather than the database
        name: Skill name as entered (trimmed)
        hours: Total accumulated practice hours
        position: Order of the skill within the persisted collection
    """

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)
    hours = Column(Float, nullable=False, default=0.0)
    position = Column(Integer, nullable=False, index=True)

    def __repr__(self) -> str:
        """String representation of Skill."""
        return f"<Skill(id={self.id}, name='{self.name}', hours={self.hours})>"
