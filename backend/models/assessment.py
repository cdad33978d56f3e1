from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database import Base


class Assessment(Base):
    __tablename__ = "assessments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=True, index=True)
    template_id = Column(Integer, ForeignKey("assessment_templates.id", ondelete="SET NULL"), nullable=True)
    session_id = Column(String(255), nullable=True, index=True)
    responses = Column(JSON, nullable=False)
    total_score = Column(Float, nullable=True)
    category_scores = Column(JSON, nullable=True)  # Snapshot of CategoryScore keyed by category id
    is_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    result = relationship("AssessmentResult", back_populates="assessment", uselist=False, cascade="all, delete-orphan")
