"""
SQLAlchemy-backed read collaborators for the scoring engine.

Option blobs are decoded and validated here, once, so the engine only ever
sees typed QuestionOption objects.
"""
import json
import logging
from typing import Any, List

from pydantic import ValidationError
from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import Assessment, AssessmentCategory, Question
from services.exceptions import StoreUnavailableError
from services.scoring_types import HistoricalCounts, QuestionOption, ScoredQuestion

logger = logging.getLogger(__name__)


def parse_options(raw_options: Any, question_id: int = None) -> List[QuestionOption]:
    """
    Parse a stored options blob into typed options.
    Handles a JSON string or an already-decoded list; option "text" maps to label.
    """
    if raw_options is None or raw_options == "":
        return []

    if isinstance(raw_options, (str, bytes)):
        try:
            raw_options = json.loads(raw_options)
        except (json.JSONDecodeError, ValueError):
            logger.warning("Unparseable options for question %s, treating as empty", question_id)
            return []

    if not isinstance(raw_options, list):
        logger.warning("Options for question %s are not a list, treating as empty", question_id)
        return []

    options = []
    for item in raw_options:
        if not isinstance(item, dict):
            logger.warning("Skipping non-object option %r for question %s", item, question_id)
            continue
        try:
            options.append(QuestionOption(
                value=item.get("value"),
                label=str(item.get("text", item.get("label", ""))),
                points=item.get("points", 0)
            ))
        except ValidationError as e:
            logger.warning("Skipping invalid option %r for question %s: %s", item, question_id, e)
    return options


class SqlQuestionStore:
    """Reads active questions joined with their active category"""

    def __init__(self, db: Session):
        self.db = db

    def list_active_questions_with_category(self) -> List[ScoredQuestion]:
        try:
            rows = self.db.query(
                Question,
                AssessmentCategory.name,
                AssessmentCategory.weight
            ).join(
                AssessmentCategory, Question.category_id == AssessmentCategory.id
            ).filter(
                Question.is_active.is_(True),
                AssessmentCategory.is_active.is_(True)
            ).order_by(
                AssessmentCategory.order_index,
                Question.order_index
            ).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreUnavailableError(f"Failed to load questions: {e}") from e

        questions = []
        for question, category_name, category_weight in rows:
            try:
                questions.append(ScoredQuestion(
                    id=question.id,
                    category_id=question.category_id,
                    category_name=category_name,
                    category_weight=category_weight,
                    weight=question.weight,
                    options=parse_options(question.options, question.id)
                ))
            except ValidationError as e:
                logger.warning("Skipping invalid question %s: %s", question.id, e)
        return questions


class SqlAssessmentStore:
    """Reads the historical corpus of completed assessment scores"""

    def __init__(self, db: Session):
        self.db = db

    def count_completed_scores(self, score: float) -> HistoricalCounts:
        try:
            total, lower = self.db.query(
                func.count(Assessment.id),
                func.coalesce(func.sum(case((Assessment.total_score < score, 1), else_=0)), 0)
            ).filter(
                Assessment.total_score.isnot(None),
                Assessment.is_completed.is_(True)
            ).one()
        except SQLAlchemyError as e:
            # Nothing written yet; clear an aborted transaction for the caller's insert
            self.db.rollback()
            raise StoreUnavailableError(f"Failed to count historical scores: {e}") from e

        return HistoricalCounts(total=int(total or 0), lower=int(lower or 0))
