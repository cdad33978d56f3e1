from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from pydantic import BaseModel
from typing import List, Optional
from database import get_db
from models import AssessmentCategory, Question
from routes.questions import QuestionResponse, to_question_response

router = APIRouter(prefix="/api/categories", tags=["categories"])


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: Optional[str]
    weight: int
    order_index: int

    class Config:
        from_attributes = True


def get_active_category(db: Session, category_id: int) -> AssessmentCategory:
    category = db.query(AssessmentCategory).filter(
        AssessmentCategory.id == category_id,
        AssessmentCategory.is_active.is_(True)
    ).first()

    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )
    return category


@router.get("", response_model=List[CategoryResponse])
async def list_categories(db: Session = Depends(get_db)):
    """Get all active categories in display order"""
    categories = db.query(AssessmentCategory).filter(
        AssessmentCategory.is_active.is_(True)
    ).order_by(AssessmentCategory.order_index).all()

    return [CategoryResponse.model_validate(category) for category in categories]


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    db: Session = Depends(get_db)
):
    """Get a specific active category"""
    return CategoryResponse.model_validate(get_active_category(db, category_id))


@router.get("/{category_id}/questions", response_model=List[QuestionResponse])
async def list_category_questions(
    category_id: int,
    db: Session = Depends(get_db)
):
    """Get the active questions of an active category"""
    category = get_active_category(db, category_id)

    questions = db.query(Question).filter(
        Question.category_id == category.id,
        Question.is_active.is_(True)
    ).order_by(Question.order_index).all()

    return [to_question_response(question, category) for question in questions]
