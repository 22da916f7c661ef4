"""
Tests for the command-line runner.
"""

from triplegraph.__main__ import build_parser, main, read_source
from tests.fakes import triple_json


class TestCli:
    """Tests for python -m triplegraph."""

    def test_defaults(self):
        args = build_parser().parse_args(["some text"])

        assert args.model == "gemini/gemini-2.0-flash"
        assert args.throttle == 1.0
        assert args.chunk_size == 1000
        assert args.chunk_overlap == 200
        assert args.dry_run is False

    def test_read_source_inline(self):
        assert read_source("The capital of France is Paris.") == (
            "The capital of France is Paris.",
            "text",
        )

    def test_read_source_long_inline_text(self):
        """Text longer than a valid file name is still read as inline text."""
        text = "Paris is the capital of France. " * 20

        assert read_source(text) == (text, "text")

    def test_read_source_file(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("Steve Jobs founded Apple.", encoding="utf-8")

        assert read_source(str(path)) == ("Steve Jobs founded Apple.", str(path))

    def test_dry_run(self, fake_llm, capsys, tmp_path):
        fake_llm.extract = lambda text: triple_json("Paris", "France", "capital_of")

        code = main(
            [
                "The capital of France is Paris.",
                "--dry-run",
                "--throttle",
                "0",
                "--env-file",
                str(tmp_path / "missing.env"),
            ]
        )

        out = capsys.readouterr().out
        assert code == 0
        assert "Unique triples (1)" in out
        assert "(Paris)-[capital_of]->(France)" in out
