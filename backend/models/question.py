from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
from database import Base


class QuestionType(str, enum.Enum):
    MULTIPLE_CHOICE = "multiple_choice"
    SCALE = "scale"
    YES_NO = "yes_no"
    TEXT = "text"


class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("assessment_categories.id", ondelete="CASCADE"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(50), default=QuestionType.MULTIPLE_CHOICE.value, nullable=False)
    weight = Column(Integer, nullable=False, default=1)
    options = Column(JSON, nullable=True)  # [{"value": 0, "text": "...", "points": 0}, ...]
    order_index = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    category = relationship("AssessmentCategory", back_populates="questions")
