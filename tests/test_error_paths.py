"""Error-path and malformed input tests.

The renderer degrades instead of raising: rejected or undecodable URLs
render nothing, missing languages give plain code blocks and symbol-only
headings still get ids.
"""

import pytest

from huellas import HtmlRenderer, RendererOptions
from huellas.errors import ConfigError, HuellasError, MalformedURLError

# =========================================================================
# Exception hierarchy
# =========================================================================


class TestConfigError:
    def test_format(self) -> None:
        err = ConfigError("highlight", "expected a callable")
        assert str(err) == "Option 'highlight': expected a callable"
        assert err.option == "highlight"

    def test_is_huellas_error(self) -> None:
        assert isinstance(ConfigError("x", "y"), HuellasError)


class TestMalformedURLError:
    def test_format(self) -> None:
        err = MalformedURLError("%zz", "bad escape")
        assert "'%zz'" in str(err)
        assert "bad escape" in str(err)
        assert err.reason == "bad escape"

    def test_catchable_as_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise MalformedURLError("%", "x")


# =========================================================================
# Graceful degradation
# =========================================================================


class TestGracefulDegradation:
    @pytest.fixture
    def renderer(self) -> HtmlRenderer:
        return HtmlRenderer(RendererOptions(sanitize=True))

    @pytest.mark.parametrize("href", ["%", "%E0%A4%A", "%C3%28", "javascript:void(0)"])
    def test_link_never_raises(self, renderer: HtmlRenderer, href: str) -> None:
        assert renderer.link(href, "t", "x") == ""
        assert renderer.image(href, "t", "x") == ""

    @pytest.mark.parametrize("lang", [None, ""])
    def test_missing_language(self, renderer: HtmlRenderer, lang: str | None) -> None:
        assert renderer.code("x", lang) == "<pre><code>x\n</code></pre>"

    @pytest.mark.parametrize("raw", ["!!!", "😀", "", "   ", "***"])
    def test_heading_always_has_valid_id(self, renderer: HtmlRenderer, raw: str) -> None:
        out = renderer.heading("x", 2, raw)
        assert out.startswith('<h2 id="id-')
