"""Tests for app.services.template."""

from bs4 import BeautifulSoup

from app.services.template import TEMPLATE_SIZE_LIMIT, prune, reduce_template

_FILLER = "<p>" + "filler text " * 8 + "</p>"


def _large_page(main: bool = True) -> str:
    content = _FILLER * 700
    body_main = "<main><h1>Main content</h1></main>" if main else "<div class='wrap'><h1>Body content</h1></div>"
    return (
        '<!DOCTYPE html><html lang="de"><head><title>Gro&szlig; &amp; klein</title>'
        "<style>.a{color:red}</style><style>.b{color:blue}</style></head><body>"
        "<header>First header</header><header>Second header</header>"
        "<nav>Menu</nav>"
        f"{body_main}"
        f"<aside>{content}</aside>"
        "<footer>Footer</footer><footer>Other footer</footer>"
        "</body></html>"
    )


class TestPrune:
    def test_removes_trackers_and_ads(self):
        html = (
            "<html><head>"
            '<script src="https://www.google-analytics.com/analytics.js"></script>'
            '<script src="https://www.googletagmanager.com/gtag/js?id=1"></script>'
            '<script src="https://connect.facebook.net/sdk.js"></script>'
            '<script async src="/widget.js"></script>'
            '<script async essential src="/app.js"></script>'
            '<script src="/main.js"></script>'
            "</head><body>"
            "<noscript>Enable JS</noscript>"
            '<div class="ads">Buy now</div>'
            '<div class="advertisement">Sponsored</div>'
            '<div data-ad="top">Banner</div>'
            "<p>Real content</p>"
            "</body></html>"
        )
        result = str(prune(BeautifulSoup(html, "lxml")))
        for removed in ("analytics.js", "gtag", "facebook", "widget.js", "Enable JS", "Buy now", "Sponsored", "Banner"):
            assert removed not in result
        assert "/app.js" in result
        assert "/main.js" in result
        assert "Real content" in result

    def test_nested_matches(self):
        html = '<div class="ads"><div data-ad="1"><noscript>x</noscript></div></div><p>Kept</p>'
        result = str(prune(BeautifulSoup(html, "lxml")))
        assert "data-ad" not in result
        assert "Kept" in result


class TestReduceTemplate:
    def test_small_document_is_returned_pruned(self):
        html = '<!DOCTYPE html><html><body><main><p>Hello</p></main><div class="ads">Ad</div></body></html>'
        result = reduce_template(html)
        assert "<main><p>Hello</p></main>" in result
        assert "Ad" not in result
        assert '<meta charset="UTF-8">' not in result

    def test_size_limit_is_inclusive(self):
        html = "<html><body><p>" + "x" * 200 + "</p></body></html>"
        pruned = str(prune(BeautifulSoup(html, "lxml")))
        assert reduce_template(html, size_limit=len(pruned)) == pruned
        assert reduce_template(html, size_limit=len(pruned) - 1) != pruned

    def test_large_document_becomes_skeleton(self):
        html = _large_page()
        assert len(str(prune(BeautifulSoup(html, "lxml")))) > 60_000

        result = reduce_template(html)
        assert result.startswith('<!DOCTYPE html>\n<html lang="de">')
        assert '<meta charset="UTF-8">' in result
        assert '<meta name="viewport" content="width=device-width, initial-scale=1.0">' in result
        assert "<title>Groß &amp; klein</title>" in result
        assert ".a{color:red}" in result
        assert ".b{color:blue}" not in result
        assert "First header" in result
        assert "Second header" not in result
        assert "<nav>Menu</nav>" in result
        assert "<main><h1>Main content</h1></main>" in result
        assert "<footer>Footer</footer>" in result
        assert "Other footer" not in result
        assert "filler text" not in result
        assert len(result) < TEMPLATE_SIZE_LIMIT

    def test_skeleton_order(self):
        result = reduce_template(_large_page())
        positions = [result.index(marker) for marker in ("<title>", "<style>", "<header>", "<nav>", "<main>", "<footer>")]
        assert positions == sorted(positions)

    def test_skeleton_without_main_uses_body(self):
        result = reduce_template(_large_page(main=False))
        assert "<main" not in result
        assert "Body content" in result
        assert "filler text" in result

    def test_skeleton_defaults(self):
        html = "<html><body>" + _FILLER * 700 + "</body></html>"
        result = reduce_template(html)
        assert result.startswith('<!DOCTYPE html>\n<html lang="en">')
        assert "<title>Website</title>" in result

    def test_empty_input(self):
        assert len(reduce_template("")) <= TEMPLATE_SIZE_LIMIT
