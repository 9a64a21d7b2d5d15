import httpx
import pytest
import respx

from storefront_ui.framework.link_validator import (
    LinkDescriptor,
    LinkValidator,
    get_link_text,
    is_link_valid,
)


@pytest.fixture
def validator():
    with LinkValidator(timeout=1.0) as v:
        yield v


@pytest.fixture
def network_down():
    """Every outbound request fails to connect."""
    with respx.mock(assert_all_called=False) as router:
        route = router.route().mock(side_effect=httpx.ConnectError("connection refused"))
        yield route


@pytest.mark.parametrize("attributes", [{}, {"href": ""}])
def test_missing_or_empty_href_is_invalid(validator, make_link, network_down, attributes):
    link = make_link("Shop", **attributes)

    assert validator.is_link_valid(link) is False
    assert not network_down.called


@pytest.mark.parametrize("href", ["javascript:void(0)", "javascript:", "#", "#/about", "#top"])
def test_in_page_links_are_valid_without_network(validator, make_link, network_down, href):
    link = make_link("Jump", href=href)

    assert validator.is_link_valid(link) is True
    assert not network_down.called


def test_reachable_url_is_valid(validator, make_link, respx_mock):
    route = respx_mock.head("https://shop.test/ok").mock(return_value=httpx.Response(200))

    assert validator.is_link_valid(make_link("OK", href="https://shop.test/ok")) is True
    assert route.call_count == 1
    assert route.calls.last.request.method == "HEAD"


@pytest.mark.parametrize("status", [404, 500])
def test_error_status_is_invalid(validator, make_link, status, respx_mock):
    respx_mock.head("https://shop.test/broken").mock(return_value=httpx.Response(status))

    result = validator.check(make_link("Broken", href="https://shop.test/broken"))

    assert result.valid is False
    assert result.status_code == status
    assert result.label == "Broken"


def test_status_399_is_still_valid(validator, make_link, respx_mock):
    respx_mock.head("https://shop.test/edge").mock(return_value=httpx.Response(399))

    assert validator.is_link_valid(make_link("Edge", href="https://shop.test/edge")) is True


def test_redirect_to_error_is_invalid(validator, make_link, respx_mock):
    respx_mock.head("https://shop.test/old").mock(
        return_value=httpx.Response(301, headers={"Location": "https://shop.test/gone"})
    )
    respx_mock.head("https://shop.test/gone").mock(return_value=httpx.Response(404))

    assert validator.is_link_valid(make_link("Old", href="https://shop.test/old")) is False


@pytest.mark.parametrize(
    "error",
    [httpx.ConnectError("refused"), httpx.ConnectTimeout("slow"), httpx.ReadTimeout("slow")],
)
def test_network_failures_are_invalid(validator, make_link, error, respx_mock):
    respx_mock.head("https://down.test/").mock(side_effect=error)

    result = validator.check(make_link("Down", href="https://down.test/"))

    assert result.valid is False
    assert result.status_code is None


def test_malformed_url_is_invalid(validator, make_link):
    assert validator.is_link_valid(make_link("Mail", href="mailto:support@shop.test")) is False


def test_relative_href_is_resolved_against_page_url(validator, make_link, fake_page, respx_mock):
    fake_page.url = "http://shop.test/#/about"
    route = respx_mock.head("http://shop.test/ftp").mock(return_value=httpx.Response(200))

    assert validator.is_link_valid(make_link("FTP", href="/ftp")) is True
    assert route.called


def test_module_level_check_with_borrowed_client(make_link, respx_mock):
    respx_mock.head("https://shop.test/ok").mock(return_value=httpx.Response(204))

    with httpx.Client() as client:
        assert is_link_valid(make_link("OK", href="https://shop.test/ok"), client=client) is True
        assert not client.is_closed


def test_link_text_prefers_visible_text(make_link):
    link = make_link("  Shop  ", aria_label="Home", title="Go Home", href="/x")
    assert get_link_text(link) == "Shop"


def test_link_text_falls_back_to_aria_label(make_link):
    assert get_link_text(make_link("   ", aria_label="Home", title="Go Home", href="/x")) == "Home"


def test_link_text_falls_back_to_title(make_link):
    assert get_link_text(make_link("", aria_label="", title="Go Home", href="/x")) == "Go Home"


def test_link_text_falls_back_to_href(make_link):
    assert get_link_text(make_link("", href="/x")) == "/x"


def test_descriptor_reads_all_fields(make_link):
    link = make_link(" GitHub ", href="https://github.com", aria_label="Code", title="Source")

    descriptor = LinkDescriptor.from_element(link)

    assert descriptor == LinkDescriptor(
        href="https://github.com", text="GitHub", aria_label="Code", title="Source"
    )
    assert descriptor.is_in_page is False


@pytest.mark.parametrize(
    "href",
    ["http://[bad", "https://shop.test:99999/x", "http://exa mple.com/", "http://"],
)
def test_malformed_href_is_invalid_not_error(validator, make_link, network_down, href):
    link = make_link("Bad", href=href)

    assert validator.is_link_valid(link) is False
    assert validator.check(link).valid is False


def test_unparseable_href_reports_malformed_url(validator, make_link, network_down):
    result = validator.check(make_link("Bad", href="http://[bad"))

    assert result.valid is False
    assert result.reason.startswith("malformed URL")
    assert result.url == "http://[bad"
    assert not network_down.called


def test_is_link_valid_reads_only_href(validator, make_link, fake_page):
    link = make_link("Jump", aria_label="Top", title="Back to top", href="#top")
    fake_page.reads.clear()

    assert validator.is_link_valid(link) is True
    assert fake_page.reads == ["href"]


def test_detached_link_is_invalid_not_error(validator, fake_page, network_down):
    gone = fake_page.locator("a#removed").first

    assert validator.is_link_valid(gone) is False

    result = validator.check(gone)
    assert result.valid is False
    assert result.reason.startswith("unreadable link")
