import logging

from .config import DEFAULT_CONFIG
from .transforms import compute_transform

logger = logging.getLogger(__name__)


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return "Point({}, {})".format(self.x, self.y)


class Line:
    """A 2D segment from p1 to p2 drawn in the named colour."""

    def __init__(self, p1, p2, colour):
        self.p1 = p1
        self.p2 = p2
        self.colour = colour

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        # Direction matters: it is the order the endpoints are written in.
        return (self.p1 == other.p1 and self.p2 == other.p2 and
                self.colour == other.colour)

    def __hash__(self):
        return hash((self.p1, self.p2, self.colour))

    def __repr__(self):
        return "Line(({}, {}), ({}, {}), {!r})".format(
            self.p1.x, self.p1.y, self.p2.x, self.p2.y, self.colour)


def render(edges, transform, colour):
    """ Yields one Line per edge, in edge order, projected by transform.

    transform is the 2x4 matrix of compute_transform(). Every edge is kept;
    nothing is clipped or deduplicated.
    """
    for edge in edges:
        r = transform @ edge
        logger.debug("%7.2f %7.2f %7.2f %7.2f",
                     r[0][0], r[1][0], r[0][1], r[1][1])
        yield Line(Point(r[0][0], r[1][0]), Point(r[0][1], r[1][1]), colour)


class Scene:
    """The edge list together with the copies to draw of it."""

    def __init__(self, edges, config=DEFAULT_CONFIG):
        self.edges = edges
        self.config = config

    def transform(self, instance):
        config = self.config
        return compute_transform(instance.scale,
                                 instance.xt, instance.yt, instance.zt,
                                 config.angle_x, config.angle_y,
                                 config.angle_z)

    def render(self):
        """ Yields the lines of every copy, one full copy after another. """
        for instance in self.config.instances:
            logger.debug("Rendering %d edges in %s at scale %s",
                         len(self.edges), instance.colour, instance.scale)
            yield from render(self.edges, self.transform(instance),
                              instance.colour)
