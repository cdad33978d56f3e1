from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from config import settings
from database import Base, create_db_engine, create_session_factory
from logging_config import configure_logging
from routes import assessments, benchmarks, categories, questions
# Import all models to ensure tables are created on startup
import models  # noqa: F401

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG
)

# CORS configuration - allow frontend URL from environment or default to all origins
allowed_origins = [settings.FRONTEND_URL] if settings.FRONTEND_URL != "*" else ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    configure_logging(settings.LOG_LEVEL)

    # The app owns the engine for its whole lifetime
    engine = create_db_engine()
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")


@app.on_event("shutdown")
async def shutdown_event():
    engine = getattr(app.state, "engine", None)
    if engine is not None:
        engine.dispose()
        logger.info("Database connection closed")


app.include_router(assessments.router)
app.include_router(categories.router)
app.include_router(questions.router)
app.include_router(benchmarks.router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}
