"""
Integration tests for CLI.
"""

import pytest

from lighthtml.cli import main, parse_args, render_report
from lighthtml.config import reset_config
from lighthtml.context import EditState, HtmlContext
from lighthtml.sample import build_header, build_sample_document, build_table


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    for key in ("LIGHTHTML_MODE", "LIGHTHTML_TRAVERSAL", "LIGHTHTML_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.mode is None
        assert args.traverse is None
        assert not args.visit
        assert not args.recursive
        assert not args.verbose

    def test_short_flags(self):
        args = parse_args(["-m", "edit", "-t", "breadth", "-r", "-v"])
        assert args.mode == "edit"
        assert args.traverse == "breadth"
        assert args.recursive
        assert args.verbose

    def test_traverse_without_strategy(self):
        args = parse_args(["--traverse"])
        assert args.traverse == ""

    def test_invalid_mode_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--mode", "preview"])


class TestSampleDocument:
    def test_header(self):
        assert build_header().render_outer() == (
            '<h1 class="" display="block" closing="closing">\n'
            '\tWelcome to my page!\n'
            '</h1>'
        )

    def test_table_inner(self):
        assert build_table().render_inner() == "Cell 1Cell 2"

    def test_document_holds_header_and_table(self):
        body = build_sample_document()
        assert [child.tag for child in body.children] == ["h1", "table"]


class TestRenderReport:
    def test_view_only(self):
        document = build_header()
        assert render_report(document, HtmlContext()) == document.render_outer()

    def test_walk_in_edit_state(self):
        document = build_header()
        report = render_report(document, HtmlContext(EditState()), walk=True, strategy="breadth")
        assert report.split("\n") == [
            "Welcome to my page!",
            "-- breadth-first traversal --",
            "Welcome to my page!",
            "Welcome to my page!",
        ]

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            render_report(build_header(), HtmlContext(), walk=True, strategy="random")

    def test_visit(self):
        document = build_table()
        report = render_report(document, HtmlContext(EditState()), visit=True)
        lines = report.split("\n")
        assert lines[0] == "Cell 1Cell 2"
        assert lines[1] == "-- visitor --"
        assert lines[2].startswith('<table class="styled-table"')


class TestMain:
    def test_view_mode(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.startswith('<body class="" display="block" closing="closing">')
        assert '<td class="" display="inline" closing="closing">' in out

    def test_edit_mode(self, capsys):
        assert main(["--mode", "edit"]) == 0
        assert capsys.readouterr().out == "Welcome to my page!Cell 1Cell 2\n"

    def test_mode_from_env(self, capsys, monkeypatch):
        monkeypatch.setenv("LIGHTHTML_MODE", "edit")
        assert main([]) == 0
        assert capsys.readouterr().out == "Welcome to my page!Cell 1Cell 2\n"

    def test_traverse_depth_first(self, capsys):
        assert main(["--mode", "edit", "--traverse", "depth"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[1] == "-- depth-first traversal --"
        # body, table, tr, td(Cell 2), text, td(Cell 1), text, h1, text
        assert lines[2:] == [
            "Welcome to my page!Cell 1Cell 2",
            "Cell 1Cell 2",
            "Cell 1Cell 2",
            "Cell 2",
            "Cell 2",
            "Cell 1",
            "Cell 1",
            "Welcome to my page!",
            "Welcome to my page!",
        ]

    def test_recursive_visit(self, capsys):
        assert main(["--visit", "--recursive"]) == 0
        out = capsys.readouterr().out
        visited = out.split("-- visitor --\n", 1)[1]
        lines = visited.splitlines()
        # text nodes are visited on their own, unindented
        assert "Welcome to my page!" in lines
        assert "Cell 1" in lines
        assert lines[-1] == "Cell 2"

    def test_traverse_breadth_first(self, capsys):
        assert main(["--mode", "edit", "--traverse", "breadth"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[1] == "-- breadth-first traversal --"
        # body, h1, table, text, tr, td, td, text, text
        assert lines[2:] == [
            "Welcome to my page!Cell 1Cell 2",
            "Welcome to my page!",
            "Cell 1Cell 2",
            "Welcome to my page!",
            "Cell 1Cell 2",
            "Cell 1",
            "Cell 2",
            "Cell 1",
            "Cell 2",
        ]

    def test_traverse_strategy_from_config(self, capsys, monkeypatch):
        monkeypatch.setenv("LIGHTHTML_TRAVERSAL", "breadth")
        assert main(["--mode", "edit", "--traverse"]) == 0
        assert "-- breadth-first traversal --" in capsys.readouterr().out

    def test_unknown_traverse_strategy(self, capsys):
        assert main(["--traverse", "sideways"]) == 1
        assert "Unknown traversal strategy" in capsys.readouterr().err
