from pydantic import BaseModel, Field
from typing import Dict, List


class QuestionOption(BaseModel):
    value: int
    label: str = ""
    points: int = Field(default=0, ge=0)


class ScoredQuestion(BaseModel):
    """An active question with its owning category's name and weight denormalized"""
    id: int
    category_id: int
    category_name: str
    category_weight: float
    weight: int = Field(default=1, ge=1)
    options: List[QuestionOption] = []

    def points_for(self, value) -> int:
        """Points for the selected value, 0 when it matches no option"""
        # True == 1, but a boolean never selects an option
        if isinstance(value, bool):
            return 0
        for option in self.options:
            if option.value == value:
                return option.points
        return 0

    def max_points(self) -> int:
        if not self.options:
            return 0
        return max(option.points for option in self.options)


class CategoryScore(BaseModel):
    score: float
    max_score: float
    percentage: float
    category_name: str


class ScoreResult(BaseModel):
    total_score: float
    category_scores: Dict[int, CategoryScore]
    percentile_rank: int
    strengths: List[str]
    weaknesses: List[str]
    recommendations: List[str]


class HistoricalCounts(BaseModel):
    total: int
    lower: int
