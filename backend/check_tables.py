"""
Script to check if all required tables exist and create them if missing
Run this if tables are not being created automatically
"""
from sqlalchemy import inspect
from database import Base, create_db_engine
import models  # noqa: F401

REQUIRED_TABLES = [
    "assessment_categories",
    "questions",
    "assessment_templates",
    "assessments",
    "assessment_results",
    "benchmarks",
]


def check_and_create_tables(engine=None):
    """Check if tables exist and create missing ones. Returns tables still missing."""
    owns_engine = engine is None
    engine = engine or create_db_engine()

    try:
        existing_tables = inspect(engine).get_table_names()
        print("Existing tables:", existing_tables)

        print("\nCreating all tables...")
        Base.metadata.create_all(bind=engine)

        updated_tables = inspect(engine).get_table_names()
        print("\nUpdated tables:", updated_tables)

        missing = []
        for table in REQUIRED_TABLES:
            if table in updated_tables:
                print(f"✅ {table} table exists")
            else:
                print(f"❌ {table} table does not exist")
                missing.append(table)
        return missing
    finally:
        if owns_engine:
            engine.dispose()


if __name__ == "__main__":
    check_and_create_tables()
    print("\n✅ Table check complete!")
