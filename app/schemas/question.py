from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Any, Optional

# -- Request --

# 질문 요청 (question 누락/빈 문자열은 서비스에서 400 처리)
class AskRequest(BaseModel):
    question: Optional[str] = Field(None, description="자유 입력 질문")

    @field_validator("question", mode="before")
    @classmethod
    def must_be_text(cls, v: Any) -> Optional[str]:
        if v is not None and not isinstance(v, str):
            raise ValueError("question must be a string")
        return v


# -- Response --

class AskResponse(BaseModel):
    question: str
    response: str
    timestamp: datetime

class HistoryItem(BaseModel):
    question: str
    response: str
    asked_at: datetime
    model_config = ConfigDict(from_attributes=True)

class HealthResponse(BaseModel):
    status: str
    timestamp: datetime

class ErrorResponse(BaseModel):
    error: str
