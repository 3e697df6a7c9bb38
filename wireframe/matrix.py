"""Small fixed-shape matrices for homogeneous 3D transforms.

Each logical shape used by the pipeline has its own type, so a product
between shapes that do not conform fails with ``TypeError`` instead of
quietly producing garbage:

    Matrix4   @ Matrix4   -> Matrix4     (composing transforms)
    Matrix4   @ PointPair -> PointPair   (transforming an edge in 3D)
    Matrix2x4 @ Matrix4   -> Matrix2x4   (projecting a composed transform)
    Matrix2x4 @ PointPair -> Matrix2x2   (projecting an edge to the screen)

All values are immutable tuples of row tuples.
"""


def _product(a, b):
    # a is n x m, b is m x p
    columns = list(zip(*b))
    return tuple(tuple(sum(x * y for x, y in zip(row, column))
                       for column in columns)
                 for row in a)


class _Matrix:
    shape = (0, 0)

    def __init__(self, rows):
        rows = tuple(tuple(float(v) for v in row) for row in rows)
        n, m = self.shape
        if len(rows) != n or any(len(row) != m for row in rows):
            raise ValueError("{} needs {}x{} values".format(
                type(self).__name__, n, m))
        self.rows = rows

    # Maps a conformable right-hand operand type to the product type.
    _products = {}

    def __matmul__(self, other):
        result_type = self._products.get(type(other))
        if result_type is None:
            return NotImplemented
        return result_type(_product(self.rows, other.rows))

    def __getitem__(self, index):
        return self.rows[index]

    def __iter__(self):
        return iter(self.rows)

    def __eq__(self, other):
        return type(self) is type(other) and self.rows == other.rows

    def __hash__(self):
        return hash((type(self).__name__, self.rows))

    def __repr__(self):
        return "{}({})".format(type(self).__name__, self.rows)

    def column(self, j):
        return tuple(row[j] for row in self.rows)


class Matrix4(_Matrix):
    shape = (4, 4)

    @classmethod
    def identity(cls):
        return cls([[1.0 if i == j else 0.0 for j in range(4)]
                    for i in range(4)])

    def transposed(self):
        return Matrix4(zip(*self.rows))

    def determinant(self):
        return _determinant(self.rows)


class Matrix2x4(_Matrix):
    shape = (2, 4)


class PointPair(_Matrix):
    """Two homogeneous 3D points stored as the columns of a 4x2 matrix."""
    shape = (4, 2)

    @classmethod
    def from_points(cls, p1, p2):
        (x1, y1, z1), (x2, y2, z2) = p1, p2
        return cls([[x1, x2], [y1, y2], [z1, z2], [1.0, 1.0]])

    def points(self):
        return self.column(0)[:3], self.column(1)[:3]


class Matrix2x2(_Matrix):
    """Two screen points stored as the columns of a 2x2 matrix."""
    shape = (2, 2)


Matrix4._products = {Matrix4: Matrix4, PointPair: PointPair}
Matrix2x4._products = {Matrix4: Matrix2x4, PointPair: Matrix2x2}


def _determinant(rows):
    if len(rows) == 1:
        return rows[0][0]
    total = 0.0
    for j, value in enumerate(rows[0]):
        if value == 0:
            continue
        minor = [row[:j] + row[j + 1:] for row in rows[1:]]
        total += (-1) ** j * value * _determinant(minor)
    return total


def multiply(a, b):
    """ Returns the matrix product a*b.

    The product is a fresh value, it never aliases either operand. Raises
    TypeError when the column count of a does not match the row count of b.
    """
    return a @ b
