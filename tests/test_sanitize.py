"""Tests for link and image URL scheme filtering."""

import logging

import pytest

from huellas import HtmlRenderer, RendererOptions
from huellas.errors import MalformedURLError
from huellas.sanitize import is_safe_url, normalize_scheme


@pytest.fixture
def sanitizing() -> HtmlRenderer:
    return HtmlRenderer(RendererOptions(sanitize=True))


class TestNormalizeScheme:
    def test_plain(self) -> None:
        assert normalize_scheme("HTTPS://Example.com/a b") == "https:examplecomab"

    def test_entities_decoded(self) -> None:
        assert normalize_scheme("&#106;avascript&colon;x").startswith("javascript:")

    def test_percent_decoded(self) -> None:
        assert normalize_scheme("java%73cript%3Ax") == "javascript:x"

    def test_whitespace_and_controls_removed(self) -> None:
        assert normalize_scheme(" java\tscript\n:x") == "javascript:x"

    def test_malformed_raises(self) -> None:
        with pytest.raises(MalformedURLError):
            normalize_scheme("%E0%A4%A")


class TestIsSafeUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "JAVASCRIPT:alert(1)",
            "  javascript:alert(1)",
            "java\nscript:alert(1)",
            "jav&#x09;ascript:alert(1)",
            "&#106;&#97;&#118;&#97;&#115;&#99;&#114;&#105;&#112;&#116;&#58;alert(1)",
            "javascript&colon;alert(1)",
            "%6Aavascript:alert(1)",
            "javascript%3Aalert(1)",
        ],
    )
    def test_javascript_rejected(self, url: str) -> None:
        assert is_safe_url(url) is False

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "/relative/path",
            "#anchor",
            "mailto:me@example.com",
            "https://example.com/?q=javascript:",
            "data:text/html;base64,PHNjcmlwdD4=",
            "vbscript:msgbox(1)",
        ],
    )
    def test_other_urls_allowed(self, url: str) -> None:
        assert is_safe_url(url) is True

    @pytest.mark.parametrize("url", ["%", "%zz", "https://x/%E0%A4%A", "%C3%28"])
    def test_malformed_encoding_rejected(self, url: str) -> None:
        assert is_safe_url(url) is False

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="huellas"):
            is_safe_url("javascript:alert(1)")
        assert any("unsafe scheme" in record.getMessage() for record in caplog.records)


class TestSanitizedRendering:
    def test_javascript_link_dropped(self, sanitizing: HtmlRenderer) -> None:
        assert sanitizing.link("javascript:alert(1)", None, "click") == ""

    def test_safe_link_kept(self, sanitizing: HtmlRenderer) -> None:
        assert sanitizing.link("https://example.com", "T", "click") == (
            '<a href="https://example.com" title="T">click</a>'
        )

    def test_malformed_link_dropped(self, sanitizing: HtmlRenderer) -> None:
        assert sanitizing.link("%E0%A4%A", None, "bad") == ""

    def test_javascript_image_dropped(self, sanitizing: HtmlRenderer) -> None:
        assert sanitizing.image("javascript:alert(1)", None, "x") == ""

    def test_safe_image_kept(self, sanitizing: HtmlRenderer) -> None:
        assert sanitizing.image("/cat.png", None, "cat") == '<img src="/cat.png" alt="cat">'

    def test_href_embedded_unchanged(self, sanitizing: HtmlRenderer) -> None:
        href = "https://example.com/a%20b?x=1&amp;y=2"
        assert sanitizing.link(href, None, "x") == f'<a href="{href}">x</a>'

    def test_sanitize_off_keeps_everything(self) -> None:
        renderer = HtmlRenderer(RendererOptions(sanitize=False))
        assert renderer.link("%E0%A4%A", None, "x") == '<a href="%E0%A4%A">x</a>'
