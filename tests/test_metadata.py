"""Tests for app.services.metadata.extract_metadata."""

from bs4 import BeautifulSoup

from app.services.metadata import extract_metadata


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


_FULL_HTML = """
<!DOCTYPE html>
<html lang="fr">
<head>
  <title>  Ma Page  </title>
  <meta name="description" content="Une description.">
  <meta name="keywords" content="a, b">
  <meta name="viewport" content="width=device-width">
</head>
<body><p>Bonjour</p></body>
</html>
"""


class TestExtractMetadata:
    def test_reads_all_fields(self):
        meta = extract_metadata(_soup(_FULL_HTML), "https://www.example.com/path?q=1")
        assert meta.title == "Ma Page"
        assert meta.description == "Une description."
        assert meta.keywords == "a, b"
        assert meta.domain == "www.example.com"
        assert meta.language == "fr"
        assert meta.viewport == "width=device-width"

    def test_defaults_when_missing(self):
        meta = extract_metadata(_soup("<p>Nothing here</p>"))
        assert meta.title == "Untitled"
        assert meta.description == ""
        assert meta.keywords == ""
        assert meta.domain == ""
        assert meta.language == "en"
        assert meta.viewport == "missing"

    def test_empty_title_is_untitled(self):
        meta = extract_metadata(_soup("<html><head><title>   </title></head></html>"))
        assert meta.title == "Untitled"

    def test_malformed_url_gives_empty_domain(self):
        meta = extract_metadata(_soup(_FULL_HTML), "http://[::1")
        assert meta.domain == ""

    def test_relative_url_gives_empty_domain(self):
        meta = extract_metadata(_soup(_FULL_HTML), "not a url")
        assert meta.domain == ""
