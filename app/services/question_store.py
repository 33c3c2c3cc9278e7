"""
질문 기록 저장소 (Persistence Gateway)
- 테이블 생성 (없을 때만)
- 질문/응답 1건 저장
- 최근 N건 조회
"""
import logging
from datetime import datetime
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.engine import Engine

from app.db.base import Base, make_session_factory
from app.errors import StorageError
from app.models.question import QuestionRecord

logger = logging.getLogger(__name__)


class QuestionStore:
    """questions 테이블 접근. 모든 SQLAlchemy 예외는 StorageError 로 감싼다."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = make_session_factory(engine)

    def init_schema(self) -> None:
        try:
            Base.metadata.create_all(bind=self.engine)  # CREATE TABLE IF NOT EXISTS
        except SQLAlchemyError as e:
            raise StorageError("schema initialization failed") from e

    def append(self, question: str, response: str, asked_at: datetime) -> None:
        try:
            with self.session_factory() as db:
                db.add(QuestionRecord(question=question, response=response, asked_at=asked_at))
                db.commit()
        except SQLAlchemyError as e:
            raise StorageError("failed to store question") from e

    def recent(self, limit: int) -> List[QuestionRecord]:
        stmt = (
            select(QuestionRecord)
            .order_by(QuestionRecord.asked_at.desc(), QuestionRecord.id.desc())
            .limit(limit)
        )
        try:
            with self.session_factory() as db:
                return list(db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise StorageError("failed to fetch question history") from e

    def dispose(self) -> None:
        logger.info("closing database connection pool")
        self.engine.dispose()
