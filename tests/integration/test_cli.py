"""Command-line front-end: argument mode and interactive loop."""

import io

import pytest

from wordhtml import cli
from wordhtml.core.models import ConversionSettings
from wordhtml.core.services import ConversionService

from tests.conftest import add_styled_paragraph


def _reader(lines):
    """Return a read_line callable that yields *lines* then raises EOFError."""
    it = iter(lines)

    def read_line():
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return read_line


class TestArgumentMode:

    def test_converts_listed_files(self, sample_docx, capsys):
        assert cli.main([str(sample_docx)]) == 0
        out = capsys.readouterr().out
        expected = sample_docx.with_name("sample.html")
        assert cli.DONE_MESSAGE.format(path=expected) in out
        assert expected.exists()

    def test_missing_file_sets_exit_status(self, sample_docx, tmp_path, capsys):
        assert cli.main([str(tmp_path / "missing.docx"), str(sample_docx)]) == 1
        out = capsys.readouterr().out
        assert cli.NOT_FOUND_MESSAGE in out
        assert sample_docx.with_name("sample.html").exists()

    def test_malformed_document_reported(self, docx_factory, capsys):
        path = docx_factory(lambda doc: add_styled_paragraph(doc, "x", "Heading"))
        assert cli.main([str(path)]) == 1
        assert "Conversion failed:" in capsys.readouterr().out
        assert not path.with_name("sample.html").exists()

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--version"])
        assert excinfo.value.code == 0
        assert capsys.readouterr().out.startswith("wordhtml v")


class TestInteractiveLoop:

    @pytest.fixture
    def service(self):
        return ConversionService(ConversionSettings())

    def test_prompts_until_end_of_input(self, service, sample_docx, tmp_path):
        out = io.StringIO()
        status = cli.interactive_loop(
            service, out, _reader([str(tmp_path / "missing.docx"), f"  {sample_docx}  "])
        )
        assert status == 0
        lines = out.getvalue().splitlines()
        assert lines == [
            cli.PROMPT,
            cli.NOT_FOUND_MESSAGE,
            cli.PROMPT,
            cli.DONE_MESSAGE.format(path=sample_docx.with_name("sample.html")),
            cli.PROMPT,
        ]

    def test_failure_does_not_stop_loop(self, service, tmp_path, sample_docx):
        broken = tmp_path / "broken.docx"
        broken.write_text("nope", encoding="utf-8")
        out = io.StringIO()
        cli.interactive_loop(service, out, _reader([str(broken), str(sample_docx)]))
        text = out.getvalue()
        assert "Conversion failed:" in text
        assert sample_docx.with_name("sample.html").exists()

    def test_document_without_body(self, service, bodyless_docx):
        out = io.StringIO()
        assert cli.convert_one(service, str(bodyless_docx), out) is False
        assert out.getvalue().startswith("Conversion failed:")
        assert not bodyless_docx.with_suffix(".html").exists()

    def test_keyboard_interrupt_ends_loop(self, service):
        def interrupted():
            raise KeyboardInterrupt

        out = io.StringIO()
        assert cli.interactive_loop(service, out, interrupted) == 0
        assert out.getvalue().splitlines() == [cli.PROMPT]

    def test_main_without_paths_is_interactive(self, monkeypatch, sample_docx, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(f"{sample_docx}\n"))
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert out.count(cli.PROMPT) == 2
        assert sample_docx.with_name("sample.html").exists()
