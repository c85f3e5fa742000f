"""
위젯 속성 선언
디자인 툴 속성 패널에서 편집 가능한 필드와 기본값
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List

from .common.subscription.models import Credentials


@dataclass
class PropertyControl:
    """속성 패널에 표시할 문자열 속성"""
    name: str
    title: str
    description: str
    type: str = "string"
    default: str = ""


PROPERTY_CONTROLS: List[PropertyControl] = [
    PropertyControl(
        name="api_key",
        title="API Key",
        description=(
            "Access to the beehiiv API is a feature of our "
            "[Grow](https://www.beehiiv.com/pricing?utm_source=framer&utm_medium=widget) plan. "
            "[Click here](https://app.beehiiv.com/settings/integrations?utm_source=framer"
            "&utm_medium=widget#api-keys) to create one."
        ),
    ),
    PropertyControl(
        name="publication_id",
        title="Pub ID",
        description=(
            "[Click here](https://app.beehiiv.com/settings/integrations#publication-id"
            "?utm_source=framer&utm_medium=widget#api-keys) to view."
        ),
    ),
]


def property_controls_schema() -> List[Dict[str, Any]]:
    """호스트 툴에 노출할 속성 선언 (JSON 직렬화용)"""
    return [asdict(control) for control in PROPERTY_CONTROLS]


@dataclass
class WidgetConfig:
    """위젯 설정

    api_key, publication_id는 비어 있으면 요청이 인증/라우팅 단계에서
    실패한다 (클라이언트 측에서 검증하지 않음).
    """
    api_key: str = ""
    publication_id: str = ""
    placeholder: str = "Enter your email"
    button_label: str = "Subscribe"
    button_color: str = "#1a73e8"
    success_message: str = "Email submitted successfully!"

    @property
    def credentials(self) -> Credentials:
        return Credentials(api_key=self.api_key, publication_id=self.publication_id)

    @classmethod
    def from_settings(cls, settings) -> "WidgetConfig":
        return cls(
            api_key=settings.beehiiv_api_key,
            publication_id=settings.beehiiv_publication_id,
        )
