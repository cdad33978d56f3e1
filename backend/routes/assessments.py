from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from pydantic import BaseModel
from typing import Any, Dict, List, Optional
from datetime import datetime
import logging
from database import get_db
from config import settings
from models import Assessment
from services.assessments import (
    build_scoring_service,
    get_assessment,
    get_latest_assessment_for_session,
    submit_assessment,
)
from services.exceptions import InvalidInputError, MetadataUnavailableError
from services.scoring_types import CategoryScore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/assessments", tags=["assessments"])


NO_STRENGTHS_TEXT = "No specific strengths identified. Focus on improving your overall scores."
NO_WEAKNESSES_TEXT = "Great job! No major weaknesses identified."
NO_RECOMMENDATIONS_TEXT = "No specific recommendations available at this time."


class AssessmentSubmitRequest(BaseModel):
    responses: Any  # validated by the scoring engine, {question_id: selected_value}
    session_id: Optional[str] = None
    template_id: Optional[int] = None


class AssessmentSubmitResponse(BaseModel):
    assessment_id: int
    session_id: str
    total_score: float
    category_scores: Dict[int, CategoryScore]
    percentile_rank: int
    strengths: List[str]
    weaknesses: List[str]
    recommendations: List[str]


class AssessmentDetailResponse(BaseModel):
    id: int
    session_id: Optional[str]
    template_id: Optional[int]
    responses: Dict[str, Any]
    total_score: Optional[float]
    category_scores: Dict[str, Any]
    is_completed: bool
    completed_at: Optional[datetime]
    created_at: Optional[datetime]
    percentile_rank: Optional[int]
    strengths: List[str]
    weaknesses: List[str]
    recommendations: List[str]
    industry_comparison: Optional[Dict[str, Any]]

    class Config:
        from_attributes = True


def to_detail_response(assessment: Assessment) -> AssessmentDetailResponse:
    """Serialize a stored assessment; empty insight lists get display fallbacks"""
    result = assessment.result
    strengths = list(result.strengths or []) if result else []
    weaknesses = list(result.weaknesses or []) if result else []
    recommendations = list(result.recommendations or []) if result else []

    return AssessmentDetailResponse(
        id=assessment.id,
        session_id=assessment.session_id,
        template_id=assessment.template_id,
        responses=assessment.responses or {},
        total_score=assessment.total_score,
        category_scores=assessment.category_scores or {},
        is_completed=assessment.is_completed,
        completed_at=assessment.completed_at,
        created_at=assessment.created_at,
        percentile_rank=result.percentile_rank if result else None,
        strengths=strengths or [NO_STRENGTHS_TEXT],
        weaknesses=weaknesses or [NO_WEAKNESSES_TEXT],
        recommendations=recommendations or [NO_RECOMMENDATIONS_TEXT],
        industry_comparison=result.industry_comparison if result else None
    )


@router.post("", response_model=AssessmentSubmitResponse)
async def create_assessment(
    request: AssessmentSubmitRequest,
    db: Session = Depends(get_db)
):
    """Submit a new assessment and return its score"""
    template_id = request.template_id or settings.DEFAULT_TEMPLATE_ID

    try:
        assessment, score_result = submit_assessment(
            db,
            build_scoring_service(db),
            request.responses,
            session_id=request.session_id,
            template_id=template_id
        )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except MetadataUnavailableError as e:
        logger.error("Assessment scoring failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to submit assessment"
        )

    return AssessmentSubmitResponse(
        assessment_id=assessment.id,
        session_id=assessment.session_id,
        total_score=score_result.total_score,
        category_scores=score_result.category_scores,
        percentile_rank=score_result.percentile_rank,
        strengths=score_result.strengths,
        weaknesses=score_result.weaknesses,
        recommendations=score_result.recommendations
    )


@router.get("/session/{session_id}", response_model=AssessmentDetailResponse)
async def get_assessment_by_session(
    session_id: str,
    db: Session = Depends(get_db)
):
    """Get the latest assessment for a session"""
    assessment = get_latest_assessment_for_session(db, session_id)
    if not assessment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assessment not found"
        )
    return to_detail_response(assessment)


@router.get("/{assessment_id}", response_model=AssessmentDetailResponse)
async def get_assessment_by_id(
    assessment_id: int,
    db: Session = Depends(get_db)
):
    """Get assessment results"""
    assessment = get_assessment(db, assessment_id)
    if not assessment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assessment not found"
        )
    return to_detail_response(assessment)
