import os

# 테스트 모드: 포트 바인딩 안 함, 기본 앱도 SQLite 사용
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.config import Settings
from app.main import create_app
from app.services.question_store import QuestionStore


@pytest.fixture
def settings():
    return Settings(_env_file=None, app_env="test", database_url="sqlite://")


@pytest.fixture
def store():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    s = QuestionStore(engine)
    s.init_schema()
    yield s
    engine.dispose()


@pytest.fixture
def client(settings, store):
    app = create_app(settings, store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def broken_store(tmp_path):
    # 존재하지 않는 디렉터리 → 연결 시 OperationalError
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'eight_ball.db'}")
    yield QuestionStore(engine)
    engine.dispose()


@pytest.fixture
def broken_client(settings, broken_store):
    app = create_app(settings, broken_store)
    with TestClient(app) as c:
        yield c
