"""Application settings using Pydantic Settings."""

from pydantic_settings import BaseSettings
from typing import List

JWT_PLACEHOLDER = "change-me"
DEV_JWT_SECRET = "fittrack-dev-secret-not-for-production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Generative Language (Gemini) Configuration
    gemini_api_key: str = ""

    # OpenAI Configuration (optional last-resort fallback)
    openai_api_key: str = ""

    # YouTube Data API
    youtube_api_key: str = ""
    youtube_search_url: str = "https://www.googleapis.com/youtube/v3/search"

    # Database Configuration
    mongodb_url: str = "mongodb://localhost:27017/fittrack"

    # Auth Configuration
    jwt_secret: str = ""
    jwt: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 365

    # Application Configuration
    app_name: str = "FitTrack API"
    app_version: str = "1.0.0"
    debug: bool = True
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8080
    request_timeout_seconds: float = 28.0

    # CORS Configuration
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:3001"]

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def token_secret(self) -> str:
        """Signing secret: JWT_SECRET, then JWT, skipping the placeholder value."""
        for candidate in (self.jwt_secret, self.jwt):
            if candidate and candidate != JWT_PLACEHOLDER:
                return candidate
        return DEV_JWT_SECRET

    @property
    def database_name(self) -> str:
        return self.mongodb_url.rsplit("/", 1)[-1].split("?")[0] or "fittrack"


# Global settings instance
settings = Settings()
