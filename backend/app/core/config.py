from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Ignore unknown env vars so a shared .env can also hold front-end keys.
    # cwd is usually `backend/`, but the .env often lives at the repo root; load both.
    model_config = SettingsConfigDict(env_file=(".env", "../.env"), case_sensitive=True, extra="ignore")

    PROJECT_NAME: str = "EstateListings"
    ENVIRONMENT: str = "development"
    API_PREFIX: str = "/api"

    SECRET_KEY: str = "change_me"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    REFRESH_TOKEN_EXPIRE_DAYS: int = 14
    JWT_ALGORITHM: str = "HS512"
    JWT_ISSUER: str = "estate-listings"
    JWT_AUDIENCE: str = "estate-listings-api"

    DATABASE_URL: str = ""
    POSTGRES_SERVER: str = "db"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "estate_listings"

    BACKEND_CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"])
    ALLOWED_HOSTS: list[str] = Field(default_factory=lambda: ["localhost", "127.0.0.1"])

    ENABLE_API_DOCS: bool = False
    ALLOW_PUBLIC_SIGNUP: bool = True
    RATE_LIMIT_ENABLED: bool = True

    LOG_LEVEL: str = "INFO"

    # Listing search
    DEFAULT_PAGE_SIZE: int = 12
    MAX_PAGE_SIZE: int = 100
    FEATURED_LIMIT: int = 6
    SEARCH_HISTORY_LIMIT: int = 10

    @model_validator(mode="after")
    def _prod_guards(self):
        if self.ENVIRONMENT.lower() == "production":
            if self.ENABLE_API_DOCS:
                raise ValueError("ENABLE_API_DOCS must be false in production")
            if not self.SECRET_KEY or len(self.SECRET_KEY) < 32:
                raise ValueError("SECRET_KEY must be 32+ chars in production")
            if any(h == "*" for h in self.ALLOWED_HOSTS):
                raise ValueError('ALLOWED_HOSTS must not contain "*" in production')
        elif not self.ALLOWED_HOSTS:
            self.ALLOWED_HOSTS = ["*"]
        return self

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
