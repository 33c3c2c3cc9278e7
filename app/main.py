# app/main.py

# ------------------------
# 환경 변수 로드
# ------------------------
from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

# ------------------------
# FastAPI, CORS 미들웨어 import
# ------------------------
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import Settings, get_settings
from app.db.base import build_engine
from app.errors import INTERNAL_ERROR, QUESTION_REQUIRED, EightBallError, StorageError
from app.routers import questions as questions_router
from app.schemas.question import HealthResponse
from app.services.eight_ball_service import EightBallService
from app.services.question_store import QuestionStore

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

# helmet 기본값에 맞춘 보안 헤더
CONTENT_SECURITY_POLICY = "; ".join([
    "default-src 'self'",
    "style-src 'self' 'unsafe-inline'",
    "script-src 'self'",
    "img-src 'self' data: https:",
])
SECURITY_HEADERS = {
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "Cross-Origin-Opener-Policy": "same-origin",
    "Referrer-Policy": "no-referrer",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Frame-Options": "SAMEORIGIN",
}


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format="[%(asctime)s] %(levelname)s %(name)s - %(message)s")


def initialize_database(store: QuestionStore) -> None:
    """테이블 생성. 실패해도 로그만 남기고 서버는 계속 뜬다."""
    try:
        store.init_schema()
        logger.info("Database initialized successfully")
    except StorageError as e:
        logger.error("Error initializing database: %s", e, exc_info=e.__cause__ or e)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    시작: 테이블 생성 (요청 수신 전에 끝남)
    테스트 모드는 create_app 에서 이미 생성했으므로 건너뜀
    종료: 커넥션 풀 정리
    """
    store: QuestionStore = app.state.store
    if not app.state.settings.is_test:
        initialize_database(store)
    yield
    store.dispose()


def create_app(settings: Optional[Settings] = None, store: Optional[QuestionStore] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    # ------------------------
    # 1) FastAPI 앱 생성 + 저장소 주입
    # ------------------------
    app = FastAPI(title="Magic Eight Ball API", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store or QuestionStore(build_engine(settings))

    # 테스트 모드: lifespan 없이도 바로 쓸 수 있게 앱 생성 시점에 테이블 생성
    if settings.is_test:
        initialize_database(app.state.store)

    # ------------------------
    # 2) 미들웨어: CORS, 보안 헤더
    # ------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    # ------------------------
    # 3) 에러 핸들러
    #    - 원인은 서버 로그에만, 응답은 고정 메시지
    # ------------------------
    @app.exception_handler(EightBallError)
    async def eight_ball_error_handler(request: Request, exc: EightBallError):
        if isinstance(exc, StorageError):
            logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc.__cause__ or exc)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # 본문 누락 / question 타입 오류
        logger.debug("rejected request body: %s", exc.errors())
        return JSONResponse(status_code=400, content={"error": QUESTION_REQUIRED})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("%s %s failed", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})

    # ------------------------
    # 4) 라우터 등록
    # ------------------------
    app.include_router(questions_router.router)

    @app.get("/health", response_model=HealthResponse)
    def health():
        return EightBallService.health()

    @app.get("/", include_in_schema=False)
    def index():
        return FileResponse(STATIC_DIR / "index.html", media_type="text/html")

    # 정적 파일 (script.js, style.css) - 라우트보다 뒤에 둬야 함
    app.mount("/", StaticFiles(directory=STATIC_DIR), name="static")

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    if settings.is_test:
        # 테스트 모드: 포트 바인딩 안 함
        logger.info("APP_ENV=test, skipping server start")
        return
    logger.info("Magic Eight Ball server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
