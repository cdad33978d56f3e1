"""Tests for the industry benchmark lookup."""

from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from models import Benchmark
from services.benchmarks import DEFAULT_BENCHMARKS, get_industry_benchmarks


def test_defaults_when_no_row(db):
    result = get_industry_benchmarks(db, "fintech", "seed")

    assert result == DEFAULT_BENCHMARKS
    assert result["category_averages"]["Financial Readiness"] == 45
    assert result["sample_size"] == 0


def test_defaults_are_copied(db):
    result = get_industry_benchmarks(db, "fintech", "seed")
    result["category_averages"]["Financial Readiness"] = 0

    assert DEFAULT_BENCHMARKS["category_averages"]["Financial Readiness"] == 45


def test_returns_matching_row(db):
    db.add(Benchmark(
        industry="fintech",
        stage="seed",
        category_averages={"Market & Opportunity": 70},
        percentiles={"50th": 62},
        sample_size=12,
    ))
    db.add(Benchmark(
        industry="health",
        stage="seed",
        category_averages={"Market & Opportunity": 40},
        percentiles={"50th": 50},
        sample_size=3,
    ))
    db.commit()

    result = get_industry_benchmarks(db, "fintech", "seed")

    assert result == {
        "category_averages": {"Market & Opportunity": 70},
        "percentiles": {"50th": 62},
        "sample_size": 12,
    }


def test_defaults_on_database_error():
    session = MagicMock()
    session.query.side_effect = OperationalError("SELECT 1", {}, Exception("timeout"))

    assert get_industry_benchmarks(session, "fintech", "seed") == DEFAULT_BENCHMARKS
