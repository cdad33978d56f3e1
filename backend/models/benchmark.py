from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.sql import func
from database import Base


class Benchmark(Base):
    __tablename__ = "benchmarks"

    id = Column(Integer, primary_key=True, index=True)
    industry = Column(String(100), nullable=False, index=True)
    stage = Column(String(50), nullable=False, index=True)
    category_averages = Column(JSON, nullable=False)  # {"Market & Opportunity": 65, ...}
    percentiles = Column(JSON, nullable=False)  # {"25th": 40, "50th": 60, ...}
    sample_size = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
