# config.py
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    # Database settings
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB_NAME: str = "employee_directory_db"
    EMPLOYEE_COLLECTION: str = "employees"

    # Upload limits
    MAX_IMAGE_SIZE: int = 5 * 1024 * 1024

    # "generic" answers duplicate emails with a plain 500, "conflict" with a 409
    DUPLICATE_EMAIL_MODE: Literal["generic", "conflict"] = "generic"

    # Where the page views reach the REST API
    API_BASE_URL: str = "http://localhost:8000"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
