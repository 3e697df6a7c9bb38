"""Loading the edge list of a wireframe.

The input is a stream of whitespace separated numbers, six per edge:
``x1 y1 z1 x2 y2 z2``. Line breaks carry no meaning. Reading stops at the
end of the stream, at the first record that is short or not numeric, or
once the edge list is full. A bad record truncates the list, it is not an
error.
"""
import itertools
import logging

from .config import MAX_WIREFRAME_EDGES, POINTS_PER_EDGE
from .errors import UnreadableInput
from .matrix import PointPair

logger = logging.getLogger(__name__)


class EdgeList:
    """Edges of a wireframe in input order.

    ``full`` is set when the capacity was reached (nothing past it was
    read), ``malformed`` when a short or non-numeric record ended parsing.
    """

    def __init__(self, capacity=MAX_WIREFRAME_EDGES):
        self.capacity = capacity
        self.edges = []
        self.full = capacity <= 0
        self.malformed = False

    def append(self, edge):
        if self.full:
            raise IndexError("edge list is full ({} edges)".format(
                self.capacity))
        self.edges.append(edge)
        if len(self.edges) >= self.capacity:
            self.full = True

    @property
    def truncated(self):
        return self.full or self.malformed

    def __len__(self):
        return len(self.edges)

    def __iter__(self):
        return iter(self.edges)

    def __getitem__(self, index):
        return self.edges[index]

    def __repr__(self):
        return "EdgeList({} edges, full={}, malformed={})".format(
            len(self.edges), self.full, self.malformed)


def _tokens(stream):
    for line in stream:
        yield from line.split()


def parse_wireframe(stream, max_edges=MAX_WIREFRAME_EDGES):
    """ Reads edges from an open text stream into an EdgeList. """
    edges = EdgeList(max_edges)
    tokens = _tokens(stream)

    while not edges.full:
        record = list(itertools.islice(tokens, POINTS_PER_EDGE))
        if not record:
            break
        try:
            values = [float(token) for token in record]
        except ValueError:
            values = None
        if values is None or len(values) < POINTS_PER_EDGE:
            edges.malformed = True
            logger.warning("Malformed record %r after %d edges, "
                           "ignoring the rest of the input",
                           " ".join(record), len(edges))
            break
        edges.append(PointPair.from_points(values[:3], values[3:]))

    if edges.full:
        logger.warning("Edge list full at %d edges, any further input "
                       "is ignored", edges.capacity)
    logger.debug("Read %d edges", len(edges))
    return edges


def read_wireframe(path, max_edges=MAX_WIREFRAME_EDGES):
    """ Reads the wireframe stored in the file at path. """
    try:
        # Undecodable bytes become non-numeric tokens and end the list
        with open(path, "r", encoding="utf-8", errors="replace") as stream:
            return parse_wireframe(stream, max_edges)
    except OSError as exc:
        raise UnreadableInput(
            "Unable to open input file {}".format(path)) from exc
