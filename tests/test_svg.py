"""Tests for the HTML5/SVG writer."""

import errno
import io

import pytest

from wireframe.errors import UnwritableOutput
from wireframe.scene import Line, Point
from wireframe import svg
from wireframe.svg import SvgWriter, format_edge


class FullDiskStream(io.StringIO):
    """Accepts writes but fails when the buffered text is flushed."""

    def close(self):
        raise OSError(errno.ENOSPC, "No space left on device")


class TestFormatEdge:

    def test_one_decimal(self):
        line = Line(Point(125, 125.04), Point(-3.25, 0.96), "magenta")
        assert format_edge(line) == (
            '<line x1="125.0" y1="125.0" x2="-3.2" y2="1.0" '
            'style="stroke: magenta;" />\n')


class TestSvgWriter:

    def test_document_layout(self):
        stream = io.StringIO()
        writer = SvgWriter(stream)
        writer.write_prologue()
        writer.write_edge(Line(Point(0, 0), Point(1, 0), "cyan"))
        writer.write_epilogue()
        assert stream.getvalue() == (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            "<title>Wireframe</title>\n"
            "</head>\n"
            "<body>\n"
            '<svg width="500px" height="500px">\n'
            '<line x1="0.0" y1="0.0" x2="1.0" y2="0.0" style="stroke: cyan;" />\n'
            "</svg>\n"
            "</body>\n"
            "</html>\n")
        assert writer.edges_written == 1

    def test_caller_keeps_stream_open(self):
        stream = io.StringIO()
        with SvgWriter(stream) as writer:
            writer.write_prologue()
        assert not stream.closed

    def test_open_and_close_file(self, tmp_path):
        path = tmp_path / "out.html"
        with SvgWriter.open(path) as writer:
            writer.write_prologue()
            writer.write_epilogue()
        assert writer.stream is None
        assert path.read_text().endswith("</html>\n")

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(UnwritableOutput):
            SvgWriter.open(tmp_path / "missing" / "out.html")

    def test_write_after_close(self):
        writer = SvgWriter(io.StringIO())
        writer.close()
        with pytest.raises(UnwritableOutput):
            writer.write_edge(Line(Point(0, 0), Point(1, 0), "blue"))

    def test_write_to_closed_stream(self):
        stream = io.StringIO()
        writer = SvgWriter(stream)
        stream.close()
        with pytest.raises(UnwritableOutput):
            writer.write_prologue()

    def test_failed_flush_on_close(self, monkeypatch, tmp_path):
        monkeypatch.setattr(svg, "open", lambda path, mode: FullDiskStream(),
                            raising=False)
        with pytest.raises(UnwritableOutput):
            with SvgWriter.open(tmp_path / "out.html") as writer:
                writer.write_prologue()
                writer.write_epilogue()
        assert writer.stream is None
