from beehiiv_form.common.subscription import PageContext, SubscriptionRequest


def test_page_context_parses_query_string():
    context = PageContext.from_url(
        "https://example.com/p?utm_source=x&utm_campaign=spring&ref=home"
    )

    assert context.url == "https://example.com/p?utm_source=x&utm_campaign=spring&ref=home"
    assert context.query_params == {"utm_source": "x", "utm_campaign": "spring", "ref": "home"}


def test_page_context_keeps_first_value_of_repeated_key():
    context = PageContext.from_url("https://example.com/?utm_source=a&utm_source=b")

    assert context.query_params["utm_source"] == "a"


def test_page_context_without_url():
    context = PageContext.from_url("")

    assert context.url == ""
    assert context.query_params == {}


def test_request_build_reads_only_tracking_params():
    context = PageContext(
        url="https://example.com/",
        query_params={"utm_medium": "email", "gclid": "abc"},
    )

    request = SubscriptionRequest.build("reader@example.com", context)

    assert request == SubscriptionRequest(
        email="reader@example.com",
        utm_source="",
        utm_medium="email",
        utm_campaign="",
        referring_url="https://example.com/",
    )
    assert "gclid" not in request.to_payload()


def test_blank_tracking_param_stays_empty():
    request = SubscriptionRequest.build(
        "reader@example.com", PageContext.from_url("https://example.com/?utm_source=")
    )

    assert request.utm_source == ""


def test_payload_sends_fixed_policy_flags():
    payload = SubscriptionRequest(email="reader@example.com").to_payload()

    assert payload["send_welcome_email"] is True
    assert payload["reactivate_existing"] is True
    assert payload["referring_site"] == ""
