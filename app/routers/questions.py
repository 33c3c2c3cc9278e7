from typing import List

from fastapi import APIRouter, Body, Depends

from app.deps import get_store
from app.schemas.question import AskRequest, AskResponse, ErrorResponse, HistoryItem
from app.services.eight_ball_service import EightBallService
from app.services.question_store import QuestionStore

router = APIRouter(prefix="/api", tags=["questions"])

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


# (1) 질문하기
# POST /api/ask
@router.post("/ask", response_model=AskResponse, responses=_ERRORS)
def ask(
    payload: AskRequest = Body(...),
    store: QuestionStore = Depends(get_store),
):
    return EightBallService.ask(store, payload.question)


# (2) 최근 기록 (최신순 10건)
# GET /api/history
@router.get("/history", response_model=List[HistoryItem], responses={500: {"model": ErrorResponse}})
def history(store: QuestionStore = Depends(get_store)):
    return EightBallService.history(store)
