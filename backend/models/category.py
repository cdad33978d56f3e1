from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database import Base


class AssessmentCategory(Base):
    __tablename__ = "assessment_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)  # e.g., "Market & Opportunity"
    description = Column(Text, nullable=True)
    weight = Column(Integer, nullable=False)  # Percentage contribution, normalized by the scoring engine
    order_index = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    questions = relationship("Question", back_populates="category", cascade="all, delete-orphan")
