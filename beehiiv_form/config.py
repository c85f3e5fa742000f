"""
beehiiv-form 설정 관리 모듈
"""

from pathlib import Path
from typing import List
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        # 프로젝트 루트 .env → 작업 디렉토리 .env 순 (뒤쪽 우선)
        env_file=(Path(__file__).parent.parent / ".env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # beehiiv 위젯 속성 (디자인 툴 속성 패널에 해당)
    beehiiv_api_key: str = Field(default="")
    beehiiv_publication_id: str = Field(default="")

    # beehiiv API
    beehiiv_api_url: str = Field(default="https://api.beehiiv.com/v2")

    # 웹 서버
    web_host: str = Field(default="0.0.0.0")
    web_port: int = Field(default=4056)
    web_base_url: str = Field(default="http://localhost:4056")

    # 폼을 iframe으로 임베드하는 외부 사이트 호스트
    allowed_embed_hosts: List[str] = Field(default_factory=list)

    # 로깅
    log_level: str = Field(default="INFO")


@lru_cache()
def get_settings() -> Settings:
    """설정 싱글톤 반환"""
    return Settings()


settings = get_settings()
