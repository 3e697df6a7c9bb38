import argparse
import dataclasses
import logging
import sys
import time

from .config import (DEFAULT_CONFIG, HTML5_SVG_OUTPUT_FILENAME,
                     WIREFRAME_INPUT_FILENAME)
from .errors import WireframeError
from .loader import read_wireframe
from .logging_config import setup_logging
from .scene import Scene
from .svg import SvgWriter

logger = logging.getLogger(__name__)


def generate_svg_file(edges, path, config=DEFAULT_CONFIG, preview=None):
    """ Writes the page drawing every copy of edges to path.

    Lines also go to preview, if one is given. Returns the number of lines
    written.
    """
    with SvgWriter.open(path, config) as writer:
        writer.write_prologue()
        for line in Scene(edges, config).render():
            writer.write_edge(line)
            if preview is not None:
                preview.draw_line(line)
        writer.write_epilogue()
        return writer.edges_written


def build_parser():
    parser = argparse.ArgumentParser(
        prog='wireframe',
        description='Draw four copies of a 3D wireframe into an HTML5/SVG page')
    parser.add_argument('--input', '-i', default=WIREFRAME_INPUT_FILENAME,
                        help='Edge list, six numbers per edge '
                        '(default: %(default)s)')
    parser.add_argument('--output', '-o', default=HTML5_SVG_OUTPUT_FILENAME,
                        help='HTML5/SVG file to write (default: %(default)s)')
    parser.add_argument('--preview', '-p',
                        help='Also rasterise the lines into this image file')
    parser.add_argument('--max-edges', '-m', type=int,
                        default=DEFAULT_CONFIG.max_edges,
                        help='Edge list capacity (default: %(default)s)')
    parser.add_argument('--title', '-t', default=DEFAULT_CONFIG.title,
                        help='Page title (default: %(default)s)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log every transformed edge')
    parser.add_argument('--log-file', help='Also write the log to this file')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        setup_logging(args.verbose, args.log_file)
    except OSError as exc:
        parser.error("cannot open log file {}: {}".format(
            args.log_file, exc.strerror))

    config = dataclasses.replace(DEFAULT_CONFIG, max_edges=args.max_edges,
                                 title=args.title)
    tstart = time.time()
    try:
        edges = read_wireframe(args.input, config.max_edges)

        preview = None
        if args.preview:
            from .preview import Preview
            preview = Preview(config)

        count = generate_svg_file(edges, args.output, config, preview)
        if preview is not None:
            preview.save(args.preview)
    except WireframeError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    tend = time.time()

    logger.info("%d lines from %d edges written to %s in %.3f ms",
                count, len(edges), args.output, (tend - tstart) * 1000)
    return 0
