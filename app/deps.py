# app/deps.py
from fastapi import Request

from app.services.question_store import QuestionStore

# ----------------------------
# 저장소 (앱 생성 시 주입된 커넥션 풀 공유)
# ----------------------------
def get_store(request: Request) -> QuestionStore:
    return request.app.state.store
