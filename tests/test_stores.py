"""Tests for the SQLAlchemy stores and option parsing."""

import json
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from models import Assessment, AssessmentCategory, Question
from services.exceptions import StoreUnavailableError
from services.stores import SqlAssessmentStore, SqlQuestionStore, parse_options


OPTIONS = [
    {"value": 0, "text": "None", "points": 0},
    {"value": 1, "text": "Some", "points": 3},
]


def add_category(db, name, weight=10, order_index=1, is_active=True):
    category = AssessmentCategory(name=name, weight=weight, order_index=order_index, is_active=is_active)
    db.add(category)
    db.flush()
    return category


def add_question(db, category, options=OPTIONS, order_index=1, is_active=True, weight=2):
    question = Question(
        category_id=category.id,
        text=f"Question {order_index}",
        weight=weight,
        options=options,
        order_index=order_index,
        is_active=is_active,
    )
    db.add(question)
    db.flush()
    return question


def broken_session():
    session = MagicMock()
    session.query.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
    return session


class TestParseOptions:
    def test_decoded_list(self):
        options = parse_options(OPTIONS)

        assert [(o.value, o.label, o.points) for o in options] == [(0, "None", 0), (1, "Some", 3)]

    def test_json_string(self):
        assert parse_options(json.dumps(OPTIONS)) == parse_options(OPTIONS)

    def test_empty_and_missing(self):
        assert parse_options(None) == []
        assert parse_options("") == []
        assert parse_options([]) == []

    def test_unparseable_string(self):
        assert parse_options("A) Yes, B) No") == []

    def test_skips_invalid_entries(self):
        options = parse_options([
            {"value": 0, "text": "Ok", "points": 1},
            {"value": "x", "text": "Bad value", "points": 1},
            {"value": 2, "text": "Negative", "points": -1},
            {"text": "No value", "points": 1},
            "not an object",
        ])

        assert [o.value for o in options] == [0]

    def test_label_fallback(self):
        assert parse_options([{"value": 1, "label": "Labelled", "points": 2}])[0].label == "Labelled"


class TestSqlQuestionStore:
    def test_joins_category_name_and_weight(self, db):
        category = add_category(db, "Market & Opportunity", weight=25)
        question = add_question(db, category)
        db.commit()

        questions = SqlQuestionStore(db).list_active_questions_with_category()

        assert len(questions) == 1
        scored = questions[0]
        assert scored.id == question.id
        assert scored.category_id == category.id
        assert scored.category_name == "Market & Opportunity"
        assert scored.category_weight == 25
        assert scored.weight == 2
        assert scored.max_points() == 3

    def test_options_stored_as_json_text(self, db):
        category = add_category(db, "Alpha")
        add_question(db, category, options=json.dumps(OPTIONS))
        db.commit()

        scored = SqlQuestionStore(db).list_active_questions_with_category()[0]

        assert scored.points_for(1) == 3

    def test_excludes_inactive_questions_and_categories(self, db):
        active = add_category(db, "Active", order_index=1)
        inactive = add_category(db, "Inactive", order_index=2, is_active=False)
        kept = add_question(db, active, order_index=1)
        add_question(db, active, order_index=2, is_active=False)
        add_question(db, inactive, order_index=1)
        db.commit()

        questions = SqlQuestionStore(db).list_active_questions_with_category()

        assert [q.id for q in questions] == [kept.id]

    def test_ordered_by_category_then_question(self, db):
        second = add_category(db, "Second", order_index=2)
        first = add_category(db, "First", order_index=1)
        q3 = add_question(db, second, order_index=1)
        q2 = add_question(db, first, order_index=2)
        q1 = add_question(db, first, order_index=1)
        db.commit()

        questions = SqlQuestionStore(db).list_active_questions_with_category()

        assert [q.id for q in questions] == [q1.id, q2.id, q3.id]

    def test_skips_questions_with_invalid_weight(self, db):
        category = add_category(db, "Team")
        kept = add_question(db, category, order_index=1)
        add_question(db, category, order_index=2, weight=0)
        add_question(db, category, order_index=3, weight=-1)
        db.commit()

        questions = SqlQuestionStore(db).list_active_questions_with_category()

        assert [q.id for q in questions] == [kept.id]

    def test_database_error_raises_store_unavailable(self):
        session = broken_session()

        with pytest.raises(StoreUnavailableError):
            SqlQuestionStore(session).list_active_questions_with_category()

        session.rollback.assert_called_once()


class TestSqlAssessmentStore:
    def test_counts_only_completed_scored_assessments(self, db):
        for score in (10, 20, 30, 40):
            db.add(Assessment(responses={}, total_score=score, is_completed=True))
        db.add(Assessment(responses={}, total_score=5, is_completed=False))
        db.add(Assessment(responses={}, total_score=None, is_completed=True))
        db.commit()

        counts = SqlAssessmentStore(db).count_completed_scores(35)

        assert counts.total == 4
        assert counts.lower == 3

    def test_strictly_lower(self, db):
        db.add(Assessment(responses={}, total_score=50, is_completed=True))
        db.commit()

        assert SqlAssessmentStore(db).count_completed_scores(50).lower == 0

    def test_empty_history(self, db):
        counts = SqlAssessmentStore(db).count_completed_scores(80)

        assert counts.total == 0
        assert counts.lower == 0

    def test_database_error_raises_store_unavailable(self):
        session = broken_session()

        with pytest.raises(StoreUnavailableError):
            SqlAssessmentStore(session).count_completed_scores(50)

        session.rollback.assert_called_once()
