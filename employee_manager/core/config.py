# employee_manager/core/config.py
from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_NAME: str = "Employee Management API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Typed RPC procedures over the employees table."
    RPC_PREFIX: str = "/trpc"

    HOST: str = "0.0.0.0"
    PORT: int = 3001
    ENVIRONMENT: Literal["development", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # Origins allowed to call the API with credentials
    CORS_ORIGINS_DEVELOPMENT: list[str] = ["http://localhost:3000"]
    CORS_ORIGINS_PRODUCTION: list[str] = ["http://localhost:3000"]

    # Full URL wins over the MySQL parts (e.g. sqlite:///./employees.db)
    DATABASE_URL: str | None = None

    # MySQL
    MYSQL_HOST: str = "localhost"
    MYSQL_PORT: int = 3306
    MYSQL_DB: str = "employees"
    MYSQL_USER: str = "root"
    MYSQL_PASSWORD: str = ""
    MYSQL_CHARSET: str = "utf8mb4"

    # Used by the console client
    API_URL: str = "http://localhost:3001"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        if self.ENVIRONMENT == "production":
            return self.CORS_ORIGINS_PRODUCTION
        return self.CORS_ORIGINS_DEVELOPMENT

    @property
    def sqlalchemy_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}"
            f"@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}"
            f"?charset={self.MYSQL_CHARSET}"
        )

@lru_cache
def get_settings() -> Settings:
    return Settings()
