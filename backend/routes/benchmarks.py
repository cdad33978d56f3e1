from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from pydantic import BaseModel
from typing import Dict
from database import get_db
from services.benchmarks import get_industry_benchmarks

router = APIRouter(prefix="/api/benchmarks", tags=["benchmarks"])


class BenchmarkResponse(BaseModel):
    industry: str
    stage: str
    category_averages: Dict[str, float]
    percentiles: Dict[str, float]
    sample_size: int


@router.get("", response_model=BenchmarkResponse)
async def read_benchmarks(
    industry: str = Query(...),
    stage: str = Query(...),
    db: Session = Depends(get_db)
):
    """Industry benchmarks for an industry/stage pair"""
    benchmarks = get_industry_benchmarks(db, industry, stage)
    return BenchmarkResponse(industry=industry, stage=stage, **benchmarks)
