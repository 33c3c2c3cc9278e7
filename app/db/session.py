# app/db/session.py
# SQLAlchemy 기본 세팅. DB URL은 Settings.database_url (.env의 DATABASE_URL)을 사용.

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.config import Settings

Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    url = settings.database_url

    # SQLite(로컬/테스트)는 스레드 체크만 끄고 기본 풀 사용
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})

    connect_args = {}
    if settings.is_production:
        connect_args["sslmode"] = "require"  # 운영 DB는 TLS 연결

    return create_engine(
        url,
        connect_args=connect_args,
        pool_pre_ping=True,                  # 끊어진 커넥션 자동 감지
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
