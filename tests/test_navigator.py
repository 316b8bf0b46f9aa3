"""Tests for the Navigator facade."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from orgnav.config import NavConfig
from orgnav.models import LinkKind
from orgnav.navigator import Navigator
from orgnav.process import ProcessResult


class TestNavigator:
    """Test Navigator wiring."""

    def test_components_share_config(self, tmp_path: Path) -> None:
        config = NavConfig(directory=tmp_path)
        navigator = Navigator(config)

        assert navigator.searcher.config is config
        assert navigator.discoverer.config is config
        assert navigator.heading_indexer.searcher is navigator.searcher
        assert navigator.backlink_resolver.searcher is navigator.searcher

    def test_root(self, tmp_path: Path) -> None:
        assert Navigator(NavConfig(directory=tmp_path)).root() == tmp_path.resolve()

    @patch("orgnav.files.run_process")
    def test_files(self, mock_run, tmp_path: Path) -> None:
        mock_run.return_value = ProcessResult(0, f"{tmp_path}/a.org\n")

        assert Navigator(NavConfig(directory=tmp_path)).files() == [tmp_path / "a.org"]

    @patch("orgnav.search.run_process")
    def test_grep(self, mock_run, tmp_path: Path) -> None:
        mock_run.return_value = ProcessResult(0, f"{tmp_path}/a.org\x002:4:needle\n")

        records = Navigator(NavConfig(directory=tmp_path)).grep("needle")

        assert len(records) == 1
        assert records[0].column == 3

    @patch("orgnav.search.run_process")
    def test_tagged_headings(self, mock_run, tmp_path: Path) -> None:
        mock_run.return_value = ProcessResult(0, f"{tmp_path}/a.org\x001:1:* Plan :work:\n")

        headings = Navigator(NavConfig(directory=tmp_path)).tagged_headings()

        assert [(h.title, h.tags) for h in headings] == [("Plan", ("work",))]

    @patch("orgnav.search.run_process")
    def test_backlinks(self, mock_run, tmp_path: Path) -> None:
        mock_run.return_value = ProcessResult(1, "")

        assert Navigator(NavConfig(directory=tmp_path)).backlinks(tmp_path / "a.org") == []

    def test_links(self, tmp_path: Path) -> None:
        note = tmp_path / "note.org"
        note.write_text("[[file:a.org][A]] [[https://example.com][Ex]]\n", encoding="utf-8")

        links = Navigator().links(note, LinkKind.FILE)

        assert [link.target for link in links] == ["a.org"]
