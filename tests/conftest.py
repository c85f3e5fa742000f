import json
from typing import Callable, List

import httpx
import pytest

from beehiiv_form.common.subscription import Credentials, PageContext, SubscriptionClient

API_URL = "https://api.beehiiv.test/v2"


class RecordingTransport(httpx.MockTransport):
    """요청을 기록하는 MockTransport"""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    def bodies(self) -> list:
        return [json.loads(r.content) for r in self.requests]


def respond(status_code: int, **kwargs) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, request=request, **kwargs)

    return handler


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key="key-123", publication_id="pub_abc")


@pytest.fixture
def context() -> PageContext:
    return PageContext.from_url("https://example.com/landing")


@pytest.fixture
def make_client():
    def factory(handler) -> SubscriptionClient:
        return SubscriptionClient(api_url=API_URL, transport=RecordingTransport(handler))

    return factory
