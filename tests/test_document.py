from pathlib import Path
from unittest.mock import patch

import pytest

from swagger_hateoas.document import SwaggerDocument, build_root
from swagger_hateoas.errors import MalformedSourceError, SourceUnavailableError
from swagger_hateoas.parser.base import Info, Link, Root

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def document():
    doc = SwaggerDocument(location=str(FIXTURES / "users.yaml"))
    doc.load()
    return doc


class TestBuildRoot:
    def test_combines_info_and_links(self):
        info = Info(title="T", description="D", version="1.0")
        links = [Link(rel="List users", href="/users")]

        root = build_root(info, links)

        assert root == Root(title="T", description="D", version="1.0", links=links)

    def test_inputs_not_mutated(self):
        info = Info(title="T", description="D", version="1.0")
        links = [Link(rel="List users", href="/users")]

        root = build_root(info, links)
        root.links.append(Link(rel="extra", href="/extra"))

        assert len(links) == 1
        assert info == Info(title="T", description="D", version="1.0")

    def test_serializes_to_json_payload(self):
        root = build_root(Info(title="T"), [Link(rel="r", href="/h")])
        assert root.model_dump() == {
            "title": "T",
            "description": "",
            "version": "",
            "links": [{"rel": "r", "href": "/h"}],
        }


class TestSwaggerDocument:
    def test_starts_empty(self):
        doc = SwaggerDocument()
        assert doc.paths() == {}
        assert doc.links("/") == []
        assert doc.info().title == ""

    def test_load_without_location_fails(self):
        with pytest.raises(ValueError):
            SwaggerDocument().load()

    def test_info(self, document):
        info = document.info()
        assert info.title == "Users API"
        assert info.version == "1.0"

    def test_root_links(self, document):
        root = document.root()
        assert root.title == "Users API"
        assert [link.href for link in root.links] == ["/orders", "/users"]

    def test_links_with_parameters(self, document):
        links = document.links("/users/:id", ["42"])
        assert links == [Link(rel="List user posts", href="/users/42/posts")]

    def test_failed_reload_keeps_previous_snapshot(self, document, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("paths: [invalid\n", encoding="utf-8")
        before = document.swagger

        with pytest.raises(MalformedSourceError):
            document.load(str(bad))

        assert document.swagger is before
        assert document.location == str(FIXTURES / "users.yaml")

    def test_unavailable_reload_keeps_previous_snapshot(self, document):
        before = document.swagger

        with patch("swagger_hateoas.document.load_document", side_effect=SourceUnavailableError("down")):
            with pytest.raises(SourceUnavailableError):
                document.load("https://example.com/swagger.yaml")

        assert document.swagger is before

    def test_reload_replaces_snapshot(self, document, tmp_path):
        other = tmp_path / "other.yaml"
        other.write_text("info:\n  title: Other\npaths:\n  /things:\n    get:\n      summary: Things\n", encoding="utf-8")

        document.load(str(other))

        assert document.info().title == "Other"
        assert document.links("/") == [Link(rel="Things", href="/things")]
