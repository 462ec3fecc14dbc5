# Tests for renderer.py: template source, filters, failure handling.
# Created: 2026-10-17

import pytest
from fastapi.testclient import TestClient

from webshare.config import DEFAULT_TEMPLATE_DIR, ServerConfig
from webshare.renderer import ViewRenderer
from webshare.server import create_app


@pytest.fixture
def root(tmp_path):
    share = tmp_path / "share"
    share.mkdir()
    (share / "data.bin").write_bytes(b"\0" * 1048576)
    return share


def _client(root, template_dir):
    config = ServerConfig(root_path=root, template_dir=template_dir)
    return TestClient(create_app(config))


class TestFilters:
    def test_filters_registered(self):
        renderer = ViewRenderer(DEFAULT_TEMPLATE_DIR)
        env = renderer.templates.env
        assert env.from_string("{{ 1024 | humansize }}").render() == "1.0 KB"
        assert env.from_string("{{ 0 | humansize }}").render() == "0.0 B"

    def test_title(self, root):
        body = _client(root, DEFAULT_TEMPLATE_DIR).get("/ui/").text
        assert "<h1>webshare</h1>" in body
        assert "1.0 MB" in body


class TestCustomTemplate:
    def test_custom_template_dir(self, root, tmp_path):
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "view.html").write_text(
            "{{ path }}|{% for n in navigation %}{{ n.name }},{% endfor %}|"
            "{% for f in files %}{{ f.name }}={{ f.size | humansize }}@{{ f.modified_at | humantime }}{% endfor %}"
        )
        resp = _client(root, templates).get("/ui/")
        assert resp.status_code == 200
        path, nav, files = resp.text.split("|")
        assert path == "/"
        assert nav == "Home,,"
        assert files.startswith("data.bin=1.0 MB@")


class TestTemplateFailures:
    def test_syntax_error_is_500(self, root, tmp_path, caplog):
        templates = tmp_path / "broken"
        templates.mkdir()
        (templates / "view.html").write_text("{% for f in files %}{{ f.name }}")

        resp = _client(root, templates).get("/ui/")
        assert resp.status_code == 500
        assert resp.text == "unable to render directory listing"
        assert any("Template view.html failed" in r.getMessage() for r in caplog.records)

    def test_missing_template_is_500(self, root, tmp_path):
        templates = tmp_path / "empty"
        templates.mkdir()
        resp = _client(root, templates).get("/ui/")
        assert resp.status_code == 500

    def test_unknown_filter_is_500(self, root, tmp_path):
        templates = tmp_path / "badfilter"
        templates.mkdir()
        (templates / "view.html").write_text("{{ files | nosuchfilter }}")
        resp = _client(root, templates).get("/ui/")
        assert resp.status_code == 500
