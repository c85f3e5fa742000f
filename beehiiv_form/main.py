"""
beehiiv-form 메인 실행 파일
"""

import asyncio
import logging
import sys
from typing import Optional

from .config import settings
from .common.subscription import SubscriptionClient, PageContext
from .web.controller import FormController
from .widget import WidgetConfig

logger = logging.getLogger(__name__)


def setup_logging():
    """로깅 설정"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )


async def subscribe_once(email: str, page_url: str, client: Optional[SubscriptionClient] = None) -> int:
    """CLI 단건 구독 신청

    Returns:
        종료 코드 (성공 0, 실패 1)
    """
    config = WidgetConfig.from_settings(settings)
    controller = FormController(email=email)
    await controller.submit(
        client or SubscriptionClient(), config.credentials, PageContext.from_url(page_url)
    )

    if controller.success:
        print(config.success_message)
        return 0
    print(controller.error, file=sys.stderr)
    return 1


def main(argv=None):
    """메인 함수"""
    import argparse

    parser = argparse.ArgumentParser(description="beehiiv-form - 뉴스레터 이메일 구독 폼")
    parser.add_argument("--subscribe", type=str, metavar="EMAIL", help="폼 없이 한 번 구독 신청")
    parser.add_argument("--page-url", type=str, default="", help="referring_site 및 UTM 파라미터로 쓸 페이지 URL")

    args = parser.parse_args(argv)

    setup_logging()

    if args.subscribe:
        logger.info("단건 구독 신청 모드")
        sys.exit(asyncio.run(subscribe_once(args.subscribe, args.page_url)))

    logger.info("웹 서버 모드")
    from .web.app import run_server
    run_server()


if __name__ == "__main__":
    main()
