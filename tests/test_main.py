import asyncio

import pytest

from beehiiv_form import main as main_module
from beehiiv_form.config import settings
from beehiiv_form.widget import WidgetConfig

from .conftest import respond


def test_subscribe_once_success(make_client, monkeypatch, capsys):
    monkeypatch.setattr(settings, "beehiiv_api_key", "key-123")
    monkeypatch.setattr(settings, "beehiiv_publication_id", "pub_abc")
    client = make_client(respond(200))

    code = asyncio.run(main_module.subscribe_once(
        "reader@example.com", "https://example.com/?utm_source=cli", client
    ))

    assert code == 0
    assert "Email submitted successfully!" in capsys.readouterr().out
    request = client.transport.requests[0]
    assert request.url.path.endswith("/publications/pub_abc/subscriptions")
    assert client.transport.bodies()[0]["utm_source"] == "cli"


def test_subscribe_once_failure_exit_code(make_client, capsys):
    client = make_client(respond(400, json={"message": "Invalid publication"}))

    code = asyncio.run(main_module.subscribe_once("reader@example.com", "", client))

    assert code == 1
    assert "Error 400: Invalid publication" in capsys.readouterr().err


def test_main_subscribe_flag_exits_with_result(monkeypatch):
    async def fake_subscribe_once(email, page_url, client=None):
        assert email == "reader@example.com"
        assert page_url == "https://example.com/"
        return 0

    monkeypatch.setattr(main_module, "subscribe_once", fake_subscribe_once)
    monkeypatch.setattr(main_module, "setup_logging", lambda: None)

    with pytest.raises(SystemExit) as exc:
        main_module.main(["--subscribe", "reader@example.com", "--page-url", "https://example.com/"])

    assert exc.value.code == 0


def test_widget_config_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "beehiiv_api_key", "k")
    monkeypatch.setattr(settings, "beehiiv_publication_id", "p")

    config = WidgetConfig.from_settings(settings)

    assert config.credentials.api_key == "k"
    assert config.credentials.publication_id == "p"
    assert config.button_label == "Subscribe"
