"""In-memory stand-ins for the scoring engine's read collaborators."""

from typing import List

from services.exceptions import StoreUnavailableError
from services.scoring_types import HistoricalCounts, QuestionOption, ScoredQuestion


DEFAULT_CATEGORIES = [
    (1, "Market & Opportunity", 25),
    (2, "Team & Leadership", 20),
    (3, "Product & Technology", 20),
    (4, "Traction & Business Model", 20),
    (5, "Financial Readiness", 15),
]


def make_question(question_id, category_id, category_name, category_weight, points, weight=1):
    """Question whose option values are 0..n-1 carrying the given points."""
    return ScoredQuestion(
        id=question_id,
        category_id=category_id,
        category_name=category_name,
        category_weight=category_weight,
        weight=weight,
        options=[
            QuestionOption(value=value, label=f"Option {value}", points=point)
            for value, point in enumerate(points)
        ],
    )


def make_default_questions(points=(0, 2, 5), per_category=2) -> List[ScoredQuestion]:
    """Two questions per default category, ids 1..10 in category order."""
    questions = []
    question_id = 1
    for category_id, name, weight in DEFAULT_CATEGORIES:
        for _ in range(per_category):
            questions.append(make_question(question_id, category_id, name, weight, list(points)))
            question_id += 1
    return questions


class FakeQuestionStore:
    def __init__(self, questions=None, error=None):
        self.questions = list(questions or [])
        self.error = error
        self.calls = 0

    def list_active_questions_with_category(self):
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.questions)


class FakeAssessmentStore:
    def __init__(self, scores=None, error=None):
        self.scores = list(scores or [])
        self.error = error
        self.requested_scores = []

    def count_completed_scores(self, score):
        self.requested_scores.append(score)
        if self.error:
            raise self.error
        return HistoricalCounts(
            total=len(self.scores),
            lower=sum(1 for s in self.scores if s < score),
        )


def unavailable(message="database is down"):
    return StoreUnavailableError(message)
