"""
beehiiv-form 웹 애플리케이션
iframe 임베드용 이메일 구독 폼
"""

import logging
from pathlib import Path
from urllib.parse import urlparse

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from .. import __version__
from ..config import settings
from ..common.subscription import SubscriptionClient, PageContext
from ..widget import WidgetConfig, property_controls_schema
from .controller import FormController

logger = logging.getLogger(__name__)

# FastAPI 앱 생성
app = FastAPI(
    title="beehiiv-form",
    description="beehiiv 뉴스레터 이메일 구독 폼",
    version=__version__,
)


class OriginCheckMiddleware(BaseHTTPMiddleware):
    """CSRF 방지: POST 요청의 Origin/Referer가 허용된 호스트인지 검증"""

    async def dispatch(self, request: Request, call_next):
        if request.method == "POST":
            origin = request.headers.get("origin") or request.headers.get("referer")
            if origin:
                parsed = urlparse(origin)
                allowed_hosts = {
                    urlparse(settings.web_base_url).hostname,
                    "localhost",
                    "127.0.0.1",
                    *settings.allowed_embed_hosts,
                }
                if parsed.hostname not in allowed_hosts:
                    logger.warning("CSRF check failed: origin=%s", origin)
                    return JSONResponse(
                        {"detail": "Forbidden: invalid origin"}, status_code=403
                    )
        return await call_next(request)


# CSRF 미들웨어 적용
app.add_middleware(OriginCheckMiddleware)

# 웹 페이지 템플릿
templates_dir = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))

_client = SubscriptionClient()


def get_subscription_client() -> SubscriptionClient:
    """구독 API 클라이언트"""
    return _client


def get_widget_config() -> WidgetConfig:
    """설정 기반 위젯 속성"""
    return WidgetConfig.from_settings(settings)


def resolve_page_url(request: Request, page_url: str) -> str:
    """폼이 표시된 페이지 URL (hidden 필드 → Referer → 요청 URL)"""
    return page_url or request.headers.get("referer") or str(request.url)


def render_form(request: Request, config: WidgetConfig, controller: FormController,
                page_url: str):
    return templates.TemplateResponse(
        request,
        "form.html",
        {
            "config": config,
            "form": controller,
            "page_url": page_url,
        },
    )


# ==================== 구독 폼 ====================

@app.get("/", response_class=HTMLResponse)
async def subscribe_form(
    request: Request,
    config: WidgetConfig = Depends(get_widget_config),
):
    """구독 폼"""
    return render_form(request, config, FormController(), str(request.url))


@app.post("/", response_class=HTMLResponse)
async def subscribe_submit(
    request: Request,
    email: str = Form(default=""),
    page_url: str = Form(default=""),
    config: WidgetConfig = Depends(get_widget_config),
    client: SubscriptionClient = Depends(get_subscription_client),
):
    """구독 신청 처리"""
    page_url = resolve_page_url(request, page_url)
    controller = FormController(email=email)
    await controller.submit(client, config.credentials, PageContext.from_url(page_url))
    return render_form(request, config, controller, page_url)


# ==================== 호스트 연동 ====================

@app.get("/properties")
async def properties():
    """속성 패널 선언"""
    return property_controls_schema()


@app.get("/health")
async def health():
    return {"status": "ok"}


# ==================== 서버 실행 ====================

def run_server():
    """웹 서버 실행"""
    import uvicorn

    logger.info(f"웹 서버 시작: http://{settings.web_host}:{settings.web_port}")
    uvicorn.run(
        app,
        host=settings.web_host,
        port=settings.web_port,
        log_level="info"
    )
