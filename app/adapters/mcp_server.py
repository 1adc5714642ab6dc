# app/adapters/mcp_server.py
"""
MCP 서버 어댑터

Primary Adapter: 에이전트가 MCP 툴 호출로 현재 정전 상태를 조회한다.
세션 관리(mcp-session-id)는 mcp SDK의 StreamableHTTP 세션 매니저가 담당.
"""
from typing import Callable
import json
import logging

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from app.application.services.outage_query import OutageQueryService

logger = logging.getLogger(__name__)

TOOL_NAME = "get_power_outages"


def tool_description(location: str) -> str:
    return (
        f"Get current power outage status for location: {location}. "
        "Returns outage information including start/stop times, duration, "
        "and affected addresses."
    )


def create_mcp_server(
    get_query_service: Callable[[], OutageQueryService],
    location: str,
) -> FastMCP:
    """
    get_power_outages 툴 하나를 가진 MCP 서버 생성

    Args:
        get_query_service: 호출 시점의 조회 서비스를 돌려주는 함수
            (서비스는 앱 lifespan 에서 만들어지므로 지연 조회)
        location: 모니터링 지역 (툴 설명에 표시)

    Returns:
        FastMCP 인스턴스 (streamable_http_app() 으로 마운트)
    """
    # host 를 localhost 로 두면 Host 헤더 검사가 켜져 배포 환경 요청이 거부됨
    mcp = FastMCP("power-outage-mcp", host="0.0.0.0")

    @mcp.tool(name=TOOL_NAME, description=tool_description(location))
    async def get_power_outages() -> str:
        result = await get_query_service().get_power_outages()

        # 에러는 isError=true 툴 결과로 반환됨
        if "error" in result:
            raise ToolError(result["error"])

        logger.info(f"🔧 MCP {TOOL_NAME} called (hasOutage={result['hasOutage']})")
        return json.dumps(result, indent=2, ensure_ascii=False)

    return mcp
