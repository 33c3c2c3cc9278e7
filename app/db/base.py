"""
공용 DB 베이스/세션 팩토리.
Base, 엔진/세션 생성 함수는 app.db.session 한 곳에서 관리한다.
"""
from app.db.session import Base, build_engine, make_session_factory

__all__ = ["Base", "build_engine", "make_session_factory"]
