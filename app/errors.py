# app/errors.py
# API 에러 분류: 입력 오류(400) / 저장소 오류(500)

QUESTION_REQUIRED = "Question is required"
INTERNAL_ERROR = "Internal server error"


class EightBallError(Exception):
    """서비스 공통 예외"""

    status_code = 500
    public_message = INTERNAL_ERROR


class QuestionValidationError(EightBallError):
    """클라이언트 입력 오류 (빈 질문 등)"""

    status_code = 400

    def __init__(self, message: str = QUESTION_REQUIRED):
        super().__init__(message)
        self.public_message = message


class StorageError(EightBallError):
    """
    DB 접근 실패.
    실제 원인은 __cause__ 로 연결해 서버 로그에만 남기고, 응답에는 노출하지 않는다.
    """
