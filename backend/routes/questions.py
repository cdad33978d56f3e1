from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from pydantic import BaseModel
from typing import List, Optional
from database import get_db
from models import AssessmentCategory, Question
from services.stores import parse_options

router = APIRouter(prefix="/api/questions", tags=["questions"])


class OptionItem(BaseModel):
    value: int
    text: str
    points: int


class QuestionResponse(BaseModel):
    id: int
    category_id: int
    category_name: Optional[str]
    category_description: Optional[str]
    text: str
    description: Optional[str]
    type: str
    weight: int
    options: List[OptionItem]
    order_index: int
    is_active: bool


def to_question_response(question: Question, category: Optional[AssessmentCategory]) -> QuestionResponse:
    return QuestionResponse(
        id=question.id,
        category_id=question.category_id,
        category_name=category.name if category else None,
        category_description=category.description if category else None,
        text=question.text,
        description=question.description,
        type=question.type,
        weight=question.weight,
        options=[
            OptionItem(value=option.value, text=option.label, points=option.points)
            for option in parse_options(question.options, question.id)
        ],
        order_index=question.order_index,
        is_active=question.is_active
    )


@router.get("", response_model=List[QuestionResponse])
async def list_questions(db: Session = Depends(get_db)):
    """Get all active questions in display order"""
    rows = db.query(Question, AssessmentCategory).join(
        AssessmentCategory, Question.category_id == AssessmentCategory.id
    ).filter(
        Question.is_active.is_(True),
        AssessmentCategory.is_active.is_(True)
    ).order_by(
        AssessmentCategory.order_index,
        Question.order_index
    ).all()

    return [to_question_response(question, category) for question, category in rows]


@router.get("/category/{category_id}", response_model=List[QuestionResponse])
async def list_questions_by_category(
    category_id: int,
    db: Session = Depends(get_db)
):
    """Get all questions of a category, empty when it has none"""
    rows = db.query(Question, AssessmentCategory).outerjoin(
        AssessmentCategory, Question.category_id == AssessmentCategory.id
    ).filter(
        Question.category_id == category_id
    ).order_by(Question.order_index, Question.id).all()

    return [to_question_response(question, category) for question, category in rows]


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: int,
    db: Session = Depends(get_db)
):
    """Get a specific question"""
    row = db.query(Question, AssessmentCategory).outerjoin(
        AssessmentCategory, Question.category_id == AssessmentCategory.id
    ).filter(Question.id == question_id).first()

    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found"
        )
    question, category = row
    return to_question_response(question, category)
