"""
Configuration settings for AgroFlow
"""
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Database
    # Either a full SQLAlchemy URL or the discrete DB_* parts below.
    # DATABASE_URL wins when both are present.
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_NAME: str = "agroflow"

    # Application
    APP_NAME: str = "AgroFlow"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    # Security
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    # CORS, comma separated
    ALLOWED_ORIGINS: str = "*"

    # Dashboard aggregation queries run on a small thread pool
    DASHBOARD_MAX_WORKERS: int = 4

    # API Gateway stage prefix stripped by the Lambda handler
    LAMBDA_BASE_PATH: str = ""

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        credentials = self.DB_USER
        if self.DB_PASSWORD:
            credentials = f"{self.DB_USER}:{self.DB_PASSWORD}"
        return f"postgresql://{credentials}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @property
    def origins(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()
