# student_rooms/core/config.py
import os
from typing import List
from dotenv import load_dotenv


def parse_origins(raw: str | None) -> List[str]:
    """Split a comma separated origin list; an empty list means every origin."""
    origins = [origin.strip() for origin in (raw or "").split(",") if origin.strip()]
    return origins or ["*"]


class Settings:
    """
    Setup environment variables.
        - APP_TITLE the title reported by FastAPI
        - HOST / PORT the address uvicorn binds to
        - CORS_ORIGINS comma separated list of allowed origins ("*" or empty for all)
        - LOG_LEVEL the root log level
    """

    # Load environment variables from the .env file
    load_dotenv()

    APP_TITLE: str = os.getenv("APP_TITLE", "Student Rooms Backend")
    # Keep in step with [project].version in pyproject.toml
    APP_VERSION: str = "1.0.0"

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    CORS_ORIGINS: List[str] = parse_origins(os.getenv("CORS_ORIGINS", "*"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
