from models.category import AssessmentCategory
from models.question import Question, QuestionType
from models.template import AssessmentTemplate
from models.assessment import Assessment
from models.assessment_result import AssessmentResult
from models.benchmark import Benchmark

__all__ = [
    "AssessmentCategory",
    "Question",
    "QuestionType",
    "AssessmentTemplate",
    "Assessment",
    "AssessmentResult",
    "Benchmark",
]
