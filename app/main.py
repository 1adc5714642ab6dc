# app/main.py
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from app.config import validate_config, QUERY_REQUIRED, POWER_OUTAGE_LOCATION, PORT
from app.adapters.mcp_server import create_mcp_server
from app.application.services.outage_query import OutageQueryService
from app.container import ServiceContainer
from app.logging_config import setup_logging

logger = logging.getLogger(__name__)


# MCP 툴은 lifespan 에서 만든 컨테이너의 조회 서비스를 사용
mcp_server = create_mcp_server(
    lambda: app.state.container.query_service,
    POWER_OUTAGE_LOCATION,
)
# session_manager 는 streamable_http_app() 호출 시 생성됨
mcp_app = mcp_server.streamable_http_app()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 시작/종료 시 실행"""
    # 0. 로깅 설정
    setup_logging()

    # 1. 필수 설정 검증 (없으면 기동 실패)
    validate_config(*QUERY_REQUIRED)

    logger.info("=" * 80)
    logger.info("🚀 Starting Power Outage Query Server")
    logger.info(f"📍 Monitoring location: {POWER_OUTAGE_LOCATION}")
    logger.info("🔌 MCP endpoint: /mcp")
    logger.info("=" * 80)

    # 2. 의존성 컨테이너 초기화 (조회 전용, Redis 없음)
    # 3. MCP 세션 매니저 (마운트된 하위 앱의 lifespan 은 실행되지 않음)
    async with ServiceContainer(with_store=False) as container:
        app.state.container = container
        async with mcp_server.session_manager.run():
            yield

    logger.info("=" * 80)
    logger.info("👋 Shutting down Power Outage Query Server")
    logger.info("=" * 80)


app = FastAPI(
    title="Power Outage Query Server",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "mcp-session-id"],
    expose_headers=["mcp-session-id"],
)


def get_query_service(request: Request) -> OutageQueryService:
    """요청 처리용 조회 서비스 (lifespan에서 만든 컨테이너)"""
    return request.app.state.container.query_service


@app.get("/health")
async def health():
    """헬스체크 엔드포인트"""
    return {
        "status": "ok",
        "location": POWER_OUTAGE_LOCATION,
    }


@app.get("/power-outages")
async def get_power_outages(
    service: OutageQueryService = Depends(get_query_service),
):
    """
    설정된 지역의 현재 정전 상태

    실패 시 502 + {"error": "..."}
    """
    result = await service.get_power_outages()
    if "error" in result:
        return JSONResponse(status_code=502, content=result)
    return result


# MCP StreamableHTTP 엔드포인트 (/mcp), 위 라우트보다 뒤에 마운트
app.mount("/", mcp_app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=PORT)
