import logging
import math
from collections.abc import Mapping
from typing import Dict, List, Optional, Tuple

from config import settings
from services.exceptions import InvalidInputError, MetadataUnavailableError, StoreUnavailableError
from services.insights import generate_recommendations, identify_strengths, identify_weaknesses
from services.scoring_types import CategoryScore, ScoredQuestion, ScoreResult

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 2) -> float:
    """Round halves away from zero for non-negative values (2.345 -> 2.35)"""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def normalize_responses(responses) -> Dict[int, object]:
    """
    Validate the responses mapping and coerce its keys to question ids.
    Keys that are not positive integers are dropped.
    """
    if not isinstance(responses, Mapping):
        raise InvalidInputError("Responses must be a mapping of question id to selected value")

    normalized = {}
    for key, value in responses.items():
        if isinstance(key, bool):
            continue
        try:
            question_id = int(key)
        except (TypeError, ValueError):
            logger.debug("Ignoring response with non-integer question id %r", key)
            continue
        if isinstance(key, float) and key != question_id:
            continue
        if question_id <= 0:
            continue
        normalized[question_id] = value
    return normalized


def calculate_category_scores(
    questions: List[ScoredQuestion],
    responses: Dict[int, object]
) -> Dict[int, dict]:
    """
    Accumulate raw and max points per category.
    Returns category id -> {"score", "max_score", "name", "weight"} in ascending id order.
    """
    totals = {}

    for question in questions:
        category = totals.setdefault(question.category_id, {
            "score": 0,
            "max_score": 0,
            "name": question.category_name,
            "weight": question.category_weight
        })

        if question.id in responses:
            category["score"] += question.points_for(responses[question.id]) * question.weight

        # Unanswered questions still count toward the category max
        category["max_score"] += question.max_points() * question.weight

    return {category_id: totals[category_id] for category_id in sorted(totals)}


def calculate_total_score(category_totals: Dict[int, dict]) -> Tuple[float, Dict[int, CategoryScore]]:
    """
    Blend category percentages by category weight into a 0-100 total.
    Categories with no attainable points keep a 0% entry but are left out of the weight denominator.
    """
    if not category_totals:
        raise MetadataUnavailableError("No active categories to score against")

    category_scores = {}
    total_weighted_score = 0.0
    total_weight = 0.0

    for category_id, totals in category_totals.items():
        if totals["max_score"] > 0:
            percentage = totals["score"] / totals["max_score"] * 100
        else:
            percentage = 0.0

        category_scores[category_id] = CategoryScore(
            score=totals["score"],
            max_score=totals["max_score"],
            percentage=round_half_up(percentage, 2),
            category_name=totals["name"]
        )

        if totals["max_score"] > 0:
            total_weighted_score += (percentage / 100) * totals["weight"]
            total_weight += totals["weight"]

    if total_weight <= 0:
        return 0.0, category_scores

    total_score = round_half_up(total_weighted_score / total_weight * 100, 2)
    return min(100.0, max(0.0, total_score)), category_scores


def calculate_percentile(total: int, lower: int, default: int = 50) -> int:
    """Share of historical scores strictly below this one, clamped to 1-99"""
    if total <= 0:
        return default
    percentile = int(round_half_up(lower / total * 100, 0))
    return max(1, min(99, percentile))


class ScoringService:
    """
    Turns a response set into a ScoreResult.

    Reads question/category metadata from question_store and historical
    totals from assessment_store. Persists nothing.
    """

    def __init__(self, question_store, assessment_store, default_percentile: Optional[int] = None):
        self.question_store = question_store
        self.assessment_store = assessment_store
        self.default_percentile = (
            default_percentile if default_percentile is not None else settings.DEFAULT_PERCENTILE
        )

    def calculate_score(self, responses, template_id: int) -> ScoreResult:
        """
        Calculate assessment score based on responses.

        template_id is accepted but does not filter questions; every active
        question is scored.
        """
        normalized = normalize_responses(responses)

        try:
            questions = self.question_store.list_active_questions_with_category()
        except StoreUnavailableError as e:
            logger.error("Question metadata unavailable: %s", e)
            raise MetadataUnavailableError(str(e)) from e

        if not questions:
            logger.error("No active questions with active categories found")
            raise MetadataUnavailableError("No active questions with active categories found")

        logger.debug(
            "Scoring %d responses against %d questions (template_id=%s)",
            len(normalized), len(questions), template_id
        )

        category_totals = calculate_category_scores(questions, normalized)
        total_score, category_scores = calculate_total_score(category_totals)

        percentile_rank = self.calculate_percentile_rank(total_score)

        result = ScoreResult(
            total_score=total_score,
            category_scores=category_scores,
            percentile_rank=percentile_rank,
            strengths=identify_strengths(category_scores),
            weaknesses=identify_weaknesses(category_scores),
            recommendations=generate_recommendations(category_scores)
        )

        logger.info(
            "Calculated score %.2f (percentile %d) across %d categories",
            result.total_score, result.percentile_rank, len(category_scores)
        )
        return result

    def calculate_percentile_rank(self, score: float) -> int:
        """Percentile rank against completed assessments; default on missing data or read failure"""
        try:
            counts = self.assessment_store.count_completed_scores(score)
        except StoreUnavailableError as e:
            logger.warning("Percentile lookup failed, using default %d: %s", self.default_percentile, e)
            return self.default_percentile

        return calculate_percentile(counts.total, counts.lower, self.default_percentile)
