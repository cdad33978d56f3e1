from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # ======================
    # Database (Render-ready)
    # ======================
    DATABASE_URL: str = Field(default="sqlite:///./vc_assessment.db")

    # =========
    # App
    # =========
    APP_NAME: str = "VC Readiness Assessment"
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    FRONTEND_URL: str = Field(default="*")

    # =========
    # Scoring
    # =========
    DEFAULT_PERCENTILE: int = Field(default=50)
    DEFAULT_TEMPLATE_ID: int = Field(default=1)

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
