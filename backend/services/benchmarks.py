import copy
import logging
from typing import Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import Benchmark

logger = logging.getLogger(__name__)


# Used when no benchmark row exists for an industry/stage pair
DEFAULT_BENCHMARKS = {
    "category_averages": {
        "Market & Opportunity": 65,
        "Team & Leadership": 60,
        "Product & Technology": 55,
        "Traction & Business Model": 50,
        "Financial Readiness": 45
    },
    "percentiles": {
        "25th": 40,
        "50th": 60,
        "75th": 80,
        "90th": 90
    },
    "sample_size": 0
}


def get_industry_benchmarks(db: Session, industry: str, stage: str) -> Dict:
    """
    Get industry benchmarks for comparison.
    Returns the most recently updated row for the pair, or the defaults.
    """
    try:
        benchmark = db.query(Benchmark).filter(
            Benchmark.industry == industry,
            Benchmark.stage == stage
        ).order_by(Benchmark.updated_at.desc(), Benchmark.id.desc()).first()
    except SQLAlchemyError as e:
        logger.warning("Benchmark lookup failed for %s/%s, using defaults: %s", industry, stage, e)
        return copy.deepcopy(DEFAULT_BENCHMARKS)

    if not benchmark:
        return copy.deepcopy(DEFAULT_BENCHMARKS)

    return {
        "category_averages": benchmark.category_averages,
        "percentiles": benchmark.percentiles,
        "sample_size": benchmark.sample_size
    }
