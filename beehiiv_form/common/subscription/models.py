"""
구독 요청/결과 데이터 모델
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Union
from urllib.parse import urlparse, parse_qsl

REASON_CONNECTIVITY = "connectivity"
REASON_UNKNOWN = "unknown"


@dataclass(frozen=True)
class Credentials:
    """beehiiv API 자격 증명 (호스트 환경에서 주입, 저장하지 않음)"""
    api_key: str = ""
    publication_id: str = ""

    def __repr__(self) -> str:
        return f"Credentials(api_key='***', publication_id={self.publication_id!r})"


@dataclass(frozen=True)
class PageContext:
    """폼이 표시된 페이지 정보 (브라우저 window.location 대체)"""
    url: str = ""
    query_params: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_url(cls, url: str) -> "PageContext":
        """URL 쿼리스트링 파싱 (중복 키는 첫 번째 값 사용)"""
        params: Dict[str, str] = {}
        for key, value in parse_qsl(urlparse(url).query, keep_blank_values=True):
            params.setdefault(key, value)
        return cls(url=url, query_params=params)


@dataclass
class SubscriptionRequest:
    """구독 요청 - 제출 시도마다 새로 생성"""
    email: str
    utm_source: str = ""
    utm_medium: str = ""
    utm_campaign: str = ""
    referring_url: str = ""

    @classmethod
    def build(cls, email: str, context: PageContext) -> "SubscriptionRequest":
        params = context.query_params
        return cls(
            email=email,
            utm_source=params.get("utm_source") or "",
            utm_medium=params.get("utm_medium") or "",
            utm_campaign=params.get("utm_campaign") or "",
            referring_url=context.url,
        )

    def to_payload(self) -> Dict[str, object]:
        """API 요청 바디"""
        return {
            "email": self.email,
            "utm_source": self.utm_source,
            "utm_medium": self.utm_medium,
            "utm_campaign": self.utm_campaign,
            "referring_site": self.referring_url,
            "send_welcome_email": True,
            "reactivate_existing": True,
        }


@dataclass(frozen=True)
class Success:
    """구독 성공"""
    ok = True


@dataclass(frozen=True)
class InvalidInput:
    """클라이언트 측 검증 실패 (요청 미발송)"""
    message: str
    ok = False


@dataclass(frozen=True)
class Rejected:
    """서버가 성공 이외의 상태 코드로 응답"""
    status_code: int
    message: str
    ok = False


@dataclass(frozen=True)
class NetworkFailure:
    """응답을 받기 전 전송 계층 오류"""
    reason: str = REASON_UNKNOWN
    ok = False


SubscriptionOutcome = Union[Success, InvalidInput, Rejected, NetworkFailure]
