import logging
import time
from datetime import datetime, timezone
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from config import settings
from models import Assessment, AssessmentResult, AssessmentTemplate
from services.scoring import ScoringService
from services.scoring_types import ScoreResult
from services.stores import SqlAssessmentStore, SqlQuestionStore

logger = logging.getLogger(__name__)


def build_scoring_service(db: Session) -> ScoringService:
    """Wire the scoring engine to SQL stores sharing one session"""
    return ScoringService(SqlQuestionStore(db), SqlAssessmentStore(db))


def resolve_template_id(db: Session, template_id: Optional[int]) -> Optional[int]:
    """
    Template id to store on an assessment.
    Unknown ids fall back to the default template, or None when that is missing too.
    """
    known_ids = {
        row_id for (row_id,) in db.query(AssessmentTemplate.id).filter(
            AssessmentTemplate.id.in_([template_id, settings.DEFAULT_TEMPLATE_ID])
        ).all()
    }
    if template_id in known_ids:
        return template_id

    fallback = settings.DEFAULT_TEMPLATE_ID if settings.DEFAULT_TEMPLATE_ID in known_ids else None
    logger.warning("Unknown template %s, storing template %s instead", template_id, fallback)
    return fallback


def submit_assessment(
    db: Session,
    scoring_service: ScoringService,
    responses,
    session_id: Optional[str] = None,
    template_id: int = 1,
    user_id: Optional[int] = None
) -> Tuple[Assessment, ScoreResult]:
    """
    Score a response set and store it with its results.
    Nothing is persisted if scoring or the insert fails.
    """
    score_result = scoring_service.calculate_score(responses, template_id)

    try:
        assessment = Assessment(
            user_id=user_id,
            template_id=resolve_template_id(db, template_id),
            session_id=session_id or f"session_{int(time.time() * 1000)}",
            # JSON object keys are strings; keep the stored shape explicit
            responses={str(k): v for k, v in responses.items()},
            total_score=score_result.total_score,
            category_scores={
                str(category_id): score.model_dump()
                for category_id, score in score_result.category_scores.items()
            },
            is_completed=True,
            completed_at=datetime.now(timezone.utc)
        )
        db.add(assessment)
        db.flush()

        db.add(AssessmentResult(
            assessment_id=assessment.id,
            strengths=score_result.strengths,
            weaknesses=score_result.weaknesses,
            recommendations=score_result.recommendations,
            percentile_rank=score_result.percentile_rank
        ))
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Failed to store assessment for session %s", session_id)
        raise

    db.refresh(assessment)
    logger.info("Stored assessment %s with score %.2f", assessment.id, score_result.total_score)
    return assessment, score_result


def get_assessment(db: Session, assessment_id: int) -> Optional[Assessment]:
    return db.query(Assessment).filter(Assessment.id == assessment_id).first()


def get_latest_assessment_for_session(db: Session, session_id: str) -> Optional[Assessment]:
    """Most recent assessment for a session"""
    return db.query(Assessment).filter(
        Assessment.session_id == session_id
    ).order_by(
        Assessment.created_at.desc(),
        Assessment.id.desc()
    ).first()
