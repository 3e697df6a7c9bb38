"""HTML5 page holding an SVG canvas of coloured line segments."""
import logging

from .config import DEFAULT_CONFIG
from .errors import UnwritableOutput

logger = logging.getLogger(__name__)


def format_edge(line):
    return ('<line x1="{:.1f}" y1="{:.1f}" x2="{:.1f}" y2="{:.1f}" '
            'style="stroke: {};" />\n'.format(line.p1.x, line.p1.y,
                                              line.p2.x, line.p2.y,
                                              line.colour))


class SvgWriter:
    """Writes lines to an already opened text stream.

    write_prologue() must come before any edge and write_epilogue() after
    the last one. Closing the stream stays with the caller unless the writer
    was made by open().
    """

    def __init__(self, stream, config=DEFAULT_CONFIG):
        self.stream = stream
        self.config = config
        self.edges_written = 0
        self._owns_stream = False

    @classmethod
    def open(cls, path, config=DEFAULT_CONFIG):
        try:
            stream = open(path, "w")
        except OSError as exc:
            raise UnwritableOutput(
                "Unable to open output file {}".format(path)) from exc
        writer = cls(stream, config)
        writer._owns_stream = True
        return writer

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        stream, self.stream = self.stream, None
        if self._owns_stream and stream is not None:
            # Buffered output only reaches the file here
            try:
                stream.close()
            except OSError as exc:
                raise UnwritableOutput("Closing SVG output failed") from exc

    def _write(self, text):
        if self.stream is None or self.stream.closed:
            raise UnwritableOutput("SVG output stream is not open")
        try:
            self.stream.write(text)
        except OSError as exc:
            raise UnwritableOutput("Writing SVG output failed") from exc

    def write_prologue(self):
        self._write("<!DOCTYPE html>\n"
                    "<html>\n"
                    "<head>\n"
                    "<title>{}</title>\n"
                    "</head>\n"
                    "<body>\n"
                    '<svg width="{}px" height="{}px">\n'.format(
                        self.config.title, self.config.canvas_width,
                        self.config.canvas_height))

    def write_edge(self, line):
        self._write(format_edge(line))
        self.edges_written += 1

    def write_epilogue(self):
        self._write("</svg>\n"
                    "</body>\n"
                    "</html>\n")
        logger.debug("Wrote %d edges", self.edges_written)
