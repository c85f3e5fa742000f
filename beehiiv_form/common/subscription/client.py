"""
beehiiv 구독 API 클라이언트
이메일 검증 → 요청 생성 → POST → 응답 해석
"""

import json
import logging
import re
from typing import Optional

import httpx

from ...config import settings
from .models import (
    Credentials, PageContext, SubscriptionRequest, SubscriptionOutcome,
    Success, InvalidInput, Rejected, NetworkFailure,
    REASON_CONNECTIVITY, REASON_UNKNOWN,
)

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

INVALID_EMAIL_MESSAGE = "Invalid email address"
UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from server"


def is_valid_email(email: str) -> bool:
    """local@domain.tld 형식 검증"""
    return bool(EMAIL_PATTERN.match(email or ""))


def mask_email(email: str) -> str:
    """로그용 이메일 마스킹"""
    local, _, domain = email.partition("@")
    if not domain:
        return "***"
    return f"{local[:2]}***@{domain}"


class SubscriptionClient:
    """beehiiv 구독 API 클라이언트

    제출마다 AsyncClient를 새로 열기 때문에 호출 간 공유 상태가 없다.
    재시도와 타임아웃은 호출 측 책임.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = (api_url or settings.beehiiv_api_url).rstrip("/")
        self.transport = transport

    def subscriptions_url(self, publication_id: str) -> str:
        return f"{self.api_url}/publications/{publication_id}/subscriptions"

    async def submit(
        self, email: str, credentials: Credentials, context: PageContext
    ) -> SubscriptionOutcome:
        """구독 신청

        Returns:
            Success / InvalidInput / Rejected / NetworkFailure 중 하나
        """
        if not is_valid_email(email):
            logger.warning("이메일 형식 오류로 요청 생략")
            return InvalidInput(message=INVALID_EMAIL_MESSAGE)

        request = SubscriptionRequest.build(email, context)
        url = self.subscriptions_url(credentials.publication_id)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {credentials.api_key}",
        }

        try:
            async with httpx.AsyncClient(timeout=None, transport=self.transport) as client:
                response = await client.post(url, headers=headers, json=request.to_payload())
        except (httpx.ConnectError, httpx.ConnectTimeout) as e:
            logger.error(f"beehiiv 연결 실패: {e}")
            return NetworkFailure(reason=REASON_CONNECTIVITY)
        except httpx.HTTPError as e:
            logger.error(f"beehiiv 요청 오류: {type(e).__name__}: {e}")
            return NetworkFailure(reason=REASON_UNKNOWN)
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.error(f"beehiiv 요청 생성 실패: {type(e).__name__}: {e}")
            return NetworkFailure(reason=REASON_UNKNOWN)

        return self._interpret(response, email)

    def _interpret(self, response: httpx.Response, email: str) -> SubscriptionOutcome:
        """응답 상태 코드 → 결과 변환"""
        if response.status_code == 200:
            logger.info(f"구독 완료: email={mask_email(email)}")
            return Success()

        try:
            body = response.json()
            message = body.get("message") if isinstance(body, dict) else None
        except (json.JSONDecodeError, UnicodeDecodeError):
            message = None

        if not isinstance(message, str) or not message:
            message = UNEXPECTED_RESPONSE_MESSAGE

        logger.warning(f"구독 거부: status={response.status_code}, message={message}")
        return Rejected(status_code=response.status_code, message=message)
