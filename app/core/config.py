from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./talentd.db"

    # Gemini Developer API key, not a Vertex AI key
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_VISION_MODEL: str = "gemini-2.5-pro"
    GEMINI_TIMEOUT_SECONDS: float = 60.0

    TEMPLATES_DIR: Path = Path("public/templates")
    UPLOADS_DIR: Path = Path("uploads")
    DOWNLOADS_DIR: Path = Path("downloads")

    MAX_TEMPLATE_ARCHIVE_BYTES: int = 50 * 1024 * 1024
    MAX_TEMPLATE_ENTRIES: int = 500
    DOWNLOAD_TTL_SECONDS: int = 3600
    UPLOAD_TTL_SECONDS: int = 86400
    CLEANUP_INTERVAL_SECONDS: int = 3600

    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
