# Tests for navigation.py: breadcrumb construction.
# Created: 2026-10-17

import pytest

from webshare.navigation import NavigationEntry, build_navigation


class TestBuildNavigation:
    def test_nested_path(self):
        nav = build_navigation("docs/2024")
        assert nav == [
            NavigationEntry(name="Home", href="/ui/", is_last=False),
            NavigationEntry(name="docs", href="/ui/docs", is_last=False),
            NavigationEntry(name="2024", href="/ui/docs/2024", is_last=True),
        ]

    def test_leading_slash_is_optional(self):
        assert build_navigation("/docs/2024") == build_navigation("docs/2024")

    def test_root_path(self):
        nav = build_navigation("")
        assert [n.name for n in nav] == ["Home", ""]
        assert nav[-1].is_last is True
        assert nav[0].href == "/ui/"

    def test_trailing_slash_gives_empty_last_entry(self):
        nav = build_navigation("/docs/")
        assert [n.name for n in nav] == ["Home", "docs", ""]
        assert nav[1].is_last is False
        assert nav[2].href == "/ui/docs/"

    def test_double_slash_kept_as_empty_segment(self):
        nav = build_navigation("a//b")
        assert [n.name for n in nav] == ["Home", "a", "", "b"]
        assert nav[-1].href == "/ui/a//b"

    def test_custom_prefix(self):
        nav = build_navigation("music", prefix="/browse")
        assert nav[0].href == "/browse/"
        assert nav[1].href == "/browse/music"

    def test_empty_prefix(self):
        nav = build_navigation("music", prefix="")
        assert nav[0].href == "/"
        assert nav[1].href == "/music"


class TestNavigationInvariants:
    @pytest.mark.parametrize(
        "path",
        ["", "/", "a", "/a", "a/b/c", "a/b/c/", "//", "a//b", "with space/ünïcode", "..", "/x/../y"],
    )
    def test_home_first_and_single_last(self, path):
        nav = build_navigation(path)
        assert len(nav) >= 1
        assert nav[0].name == "Home"
        assert nav[-1].is_last is True
        assert sum(1 for n in nav if n.is_last) == 1

    def test_hrefs_extend_previous(self):
        nav = build_navigation("a/b/c")
        hrefs = [n.href for n in nav[1:]]
        for parent, child in zip(hrefs, hrefs[1:]):
            assert child.startswith(parent + "/")
