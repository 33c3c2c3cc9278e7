# app/config.py

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()  # .env 파일 먼저 읽기

BASE_DIR = Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    # 환경 구분: local | production | test
    app_env: str = "local"

    # 서버
    host: str = "0.0.0.0"
    port: int = 3000                         # PORT
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # DB
    database_url: str = "postgresql+psycopg2://localhost:5432/magic_eight_ball"  # DATABASE_URL
    db_pool_size: int = 10
    db_max_overflow: int = 0                 # 풀 크기 초과 연결 금지
    db_pool_timeout: int = 30                # 풀 고갈 시 대기 시간(초)

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_test(self) -> bool:
        return self.app_env.lower() == "test"

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
