"""
매직 8볼 비즈니스 로직
- 질문 → 랜덤 응답 + 저장
- 최근 기록 조회
- 헬스 체크
"""
import logging
import random
from datetime import datetime, timezone
from typing import List, Optional

from app.errors import QuestionValidationError
from app.schemas.question import AskResponse, HealthResponse, HistoryItem
from app.services.question_store import QuestionStore
from app.services.responses import pick_random

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 10


def _now() -> datetime:
    return datetime.now(timezone.utc)


class EightBallService:
    """요청 단위 핸들러 모음. 상태 없음, 저장소는 인자로 주입."""

    @staticmethod
    def ask(
        store: QuestionStore,
        question: Optional[str],
        rng: Optional[random.Random] = None,
    ) -> AskResponse:
        """
        질문 1건 처리

        Raises:
            QuestionValidationError: 질문이 없거나 공백뿐일 때 (저장 안 함)
            StorageError: 저장 실패
        """
        text = (question or "").strip()
        if not text:
            raise QuestionValidationError()

        response = pick_random(rng)
        store.append(text, response, _now())
        logger.debug("answered question=%r response=%r", text, response)

        return AskResponse(question=text, response=response, timestamp=_now())

    @staticmethod
    def history(store: QuestionStore, limit: int = HISTORY_LIMIT) -> List[HistoryItem]:
        """최근 기록 (최신순, 최대 limit 건)"""
        return [HistoryItem.model_validate(r) for r in store.recent(limit)]

    @staticmethod
    def health() -> HealthResponse:
        # DB 연결은 확인하지 않음 (liveness 전용)
        return HealthResponse(status="healthy", timestamp=_now())
