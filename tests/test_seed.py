"""Tests for seeding and table checks against the default questionnaire."""

from check_tables import REQUIRED_TABLES, check_and_create_tables
from models import AssessmentCategory, AssessmentTemplate, Question
from seed_questions import seed_database
from services.assessments import build_scoring_service


def test_seeds_default_questionnaire(seeded_db):
    categories = seeded_db.query(AssessmentCategory).order_by(AssessmentCategory.order_index).all()

    assert [c.weight for c in categories] == [25, 20, 20, 20, 15]
    assert categories[0].name == "Market & Opportunity"
    assert seeded_db.query(Question).count() == 20
    assert seeded_db.query(AssessmentTemplate).count() == 1


def test_seed_is_skipped_when_data_exists(seeded_db):
    assert seed_database(seeded_db) is False
    assert seeded_db.query(Question).count() == 20


def test_check_tables_reports_nothing_missing(engine, capsys):
    assert check_and_create_tables(engine) == []
    assert "assessments table exists" in capsys.readouterr().out
    assert "benchmarks" in REQUIRED_TABLES


def test_fully_maxed_questionnaire_scores_100(seeded_db, question_ids):
    result = build_scoring_service(seeded_db).calculate_score({qid: 4 for qid in question_ids}, 1)

    assert result.total_score == 100.0
    assert result.percentile_rank == 50
    assert result.strengths[0] == "Market & Opportunity is your strongest area"


def test_lowest_answers_blend_category_minimums(seeded_db, question_ids):
    result = build_scoring_service(seeded_db).calculate_score({qid: 0 for qid in question_ids}, 1)

    percentages = [score.percentage for score in result.category_scores.values()]
    # Team questions score at least 1 point on three of four questions
    assert percentages == [0.0, 15.0, 0.0, 0.0, 0.0]
    assert result.total_score == 3.0
    assert result.strengths == []
    assert result.weaknesses[1] == "Team & Leadership needs significant improvement (15%)"
    assert len(result.recommendations) == 8
