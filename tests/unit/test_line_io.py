"""Unit tests for line source and sink."""

import gzip
from io import BytesIO

import pytest

from lineslice.io import LineSink, LineSource, split_line


class TestSplitLine:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (b"abc\n", b"abc"),
            (b"abc\r\n", b"abc"),
            (b"abc", b"abc"),
            (b"abc\r", b"abc\r"),
            (b"a\rb\n", b"a\rb"),
            (b"\n", b""),
            (b"abc\r\r\n", b"abc\r"),
        ],
    )
    def test_strips_one_terminator(self, raw, expected):
        assert split_line(raw) == expected


class TestLineSource:
    def test_reads_lf_and_crlf(self):
        source = LineSource(stream=BytesIO(b"a\r\nb\nc"))
        assert list(source) == ["a", "b", "c"]

    def test_lone_cr_is_data(self):
        source = LineSource(stream=BytesIO(b"a\rb\nc\r"))
        assert list(source) == ["a\rb", "c\r"]

    def test_empty_stream(self):
        assert list(LineSource(stream=BytesIO(b""))) == []

    def test_dash_means_stream(self):
        source = LineSource("-", stream=BytesIO(b"x\n"))
        assert source.path is None
        assert source.name == "<stdin>"
        assert list(source) == ["x"]

    def test_reads_file(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_bytes(b"one\r\ntwo\r\n")
        with LineSource(path) as source:
            assert list(source) == ["one", "two"]
        assert source.name == str(path)

    def test_iterates_without_context_manager(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_bytes(b"one\ntwo\n")
        assert list(LineSource(str(path))) == ["one", "two"]

    def test_reads_gzip_file(self, tmp_path):
        path = tmp_path / "input.txt.gz"
        with gzip.open(path, "wb") as f:
            f.write(b"zipped\nlines\n")
        with LineSource(path) as source:
            assert list(source) == ["zipped", "lines"]

    def test_missing_file_fails_on_enter(self, tmp_path):
        source = LineSource(tmp_path / "missing.txt")
        with pytest.raises(FileNotFoundError):
            source.__enter__()

    def test_closes_file_on_exit(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_bytes(b"a\n")
        with LineSource(path) as source:
            handle = source._handle
        assert handle.closed
        assert source._handle is None

    def test_does_not_close_stream(self):
        stream = BytesIO(b"a\n")
        with LineSource(stream=stream) as source:
            list(source)
        list(LineSource(stream=stream))
        assert not stream.closed

    def test_strict_decoding_raises(self):
        with pytest.raises(UnicodeDecodeError):
            list(LineSource(stream=BytesIO(b"\xff\n")))

    def test_replace_decoding(self):
        source = LineSource(stream=BytesIO(b"a\xffb\n"), errors="replace")
        assert list(source) == ["a\ufffdb"]

    def test_custom_encoding(self):
        source = LineSource(stream=BytesIO(b"caf\xe9\n"), encoding="latin-1")
        assert list(source) == ["café"]


class TestLineSink:
    def test_appends_lf(self):
        out = BytesIO()
        sink = LineSink(out)
        sink.write_line("a")
        sink.write_line("")
        sink.write_line("é")
        assert out.getvalue() == b"a\n\n\xc3\xa9\n"
        assert sink.lines_written == 3

    def test_encoding(self):
        out = BytesIO()
        LineSink(out, encoding="latin-1").write_line("café")
        assert out.getvalue() == b"caf\xe9\n"

    def test_unencodable_raises(self):
        with pytest.raises(UnicodeEncodeError):
            LineSink(BytesIO(), encoding="ascii").write_line("é")
