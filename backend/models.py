import uuid

from sqlalchemy import Column, String, Text, Boolean, DateTime, JSON, UniqueConstraint, Index
from backend.db import Base


def _new_id():
    return str(uuid.uuid4())


class HackathonDB(Base):
    __tablename__ = "hackathons"

    id = Column(String, primary_key=True, default=_new_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    registration_deadline = Column(DateTime(timezone=True), nullable=False)
    registration_url = Column(String, nullable=False)
    source = Column(String, nullable=False)
    mode = Column(String, nullable=False)
    location = Column(String, nullable=True)
    prize_pool = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
    skills = Column(JSON, default=list, nullable=False)
    dates_estimated = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        UniqueConstraint('title', 'source', name='uq_hackathons_title_source'),
        Index('idx_hackathons_active_deadline', 'is_active', 'registration_deadline'),
    )

    @property
    def skill_list(self):
        return list(self.skills or [])

    def __repr__(self):
        return f"<Hackathon(title='{self.title}', source='{self.source}')>"
