# app/models/question.py
from sqlalchemy import Column, Integer, Text, DateTime, func
from app.db.base import Base

class QuestionRecord(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    question = Column(Text, nullable=False)
    response = Column(Text, nullable=False)
    asked_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)

    def __repr__(self) -> str:
        return f"<QuestionRecord id={self.id} question={self.question!r}>"
