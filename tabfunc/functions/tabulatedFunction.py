# Copyright 2026 TerraPower, LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
The shared contract of the tabulated function storage strategies.

A tabulated function is a finite sequence of (x, y) points with strictly increasing x, always at
least two points long. Its domain is ``[x[0], x[-1]]``; inside the domain it is evaluated by
piecewise-linear interpolation between neighbouring points (the "knots"), outside the domain its
value is ``nan``.

Floating point x values are never compared exactly. Every container carries a tolerance, epsilon,
read from the ``epsilon`` setting when it is built: two x values closer than epsilon are the same x,
so consecutive points must satisfy ``x[i + 1] > x[i] + epsilon``.

There are exactly two storage strategies, and they are observably equivalent:

* :py:class:`~tabfunc.functions.arrayTabulatedFunction.ArrayTabulatedFunction` keeps the points in
  one contiguous, growable numpy buffer.
* :py:class:`~tabfunc.functions.linkedListTabulatedFunction.LinkedListTabulatedFunction` keeps them
  in a circular doubly-linked chain with a sentinel node.

This module holds what the two have in common: construction and input validation, the ordering and
index checks used by the setters, the interpolation rule, equality, hashing, copying, pickling and
string representations.
"""

import math
import operator
import struct

import numpy as np

from tabfunc import settings
from tabfunc.functions.function import Function
from tabfunc.functions.point import FunctionPoint
from tabfunc.settings.globalSettings import CONF_EPSILON
from tabfunc.utils.customExceptions import (
    InvalidArgumentError,
    InvalidPointError,
    PointIndexOutOfRangeError,
)

_HASH_MASK = 0xFFFFFFFFFFFFFFFF


def _asPair(point):
    """Return the (x, y) of a FunctionPoint or of any two-element sequence, as floats."""
    x, y = point
    return float(x), float(y)


def _foldBits(value):
    """Fold the 64 IEEE-754 bits of a float into 32; negative zero is folded as zero."""
    (bits,) = struct.unpack("<Q", struct.pack("<d", value + 0.0))
    return (bits ^ (bits >> 32)) & 0xFFFFFFFF


def uniformGrid(leftX: float, rightX: float, pointsCount: int):
    """
    Return ``pointsCount`` uniformly spaced x values from ``leftX`` to ``rightX``, both included.

    The i-th value is ``leftX + i * step`` with ``step = (rightX - leftX) / (pointsCount - 1)``.
    """
    step = (rightX - leftX) / (pointsCount - 1)
    return leftX + np.arange(pointsCount) * step


class TabulatedFunction(Function):
    """
    A base class for the tabulated function storage strategies.

    Subclasses own the storage. They implement the storage hooks ``_load`` and ``_pairs`` and the
    point access methods; everything else here is written in terms of those.
    """

    def __init__(self, points, epsilon: float = None):
        """
        Build a tabulated function from explicit points.

        Parameters
        ----------
        points: iterable
            FunctionPoint objects or (x, y) pairs, in strictly increasing x order. They are copied.
        epsilon: float, optional
            Comparison tolerance for x values. Defaults to the ``epsilon`` setting of the master
            settings object.
        """
        if epsilon is None:
            epsilon = settings.getMasterCs()[CONF_EPSILON]

        self._epsilon = float(epsilon)
        """Tolerance used for every x comparison made by this function."""

        self._load(self._validatePoints(points))

    @classmethod
    def fromPointsCount(cls, leftX: float, rightX: float, pointsCount: int, epsilon: float = None):
        """
        Build a function with ``pointsCount`` points spread uniformly over ``[leftX, rightX]``, all with y = 0.
        """
        if leftX >= rightX:
            raise InvalidArgumentError(f"The left border ({leftX}) must be less than the right border ({rightX})")
        if pointsCount < 2:
            raise InvalidArgumentError(f"At least 2 points are required, got {pointsCount}")

        xs = uniformGrid(leftX, rightX, pointsCount)
        return cls(zip(xs, np.zeros(pointsCount)), epsilon=epsilon)

    @classmethod
    def fromValues(cls, leftX: float, rightX: float, values, epsilon: float = None):
        """
        Build a function over ``[leftX, rightX]`` with the given y values at uniformly spaced x values.
        """
        if leftX >= rightX:
            raise InvalidArgumentError(f"The left border ({leftX}) must be less than the right border ({rightX})")

        values = np.asarray(values, dtype=float)
        if values.ndim != 1 or len(values) < 2:
            raise InvalidArgumentError(f"At least 2 values are required, got {values.size}")

        xs = uniformGrid(leftX, rightX, len(values))
        return cls(zip(xs, values), epsilon=epsilon)

    @property
    def epsilon(self) -> float:
        return self._epsilon

    def _validatePoints(self, points) -> list:
        """
        Check a whole input sequence in one pass, and return it as a list of float (x, y) pairs.

        Raises
        ------
        InvalidArgumentError
            If there are fewer than two points, or the x values are not strictly increasing.
        """
        pairs = [_asPair(p) for p in points]
        if len(pairs) < 2:
            raise InvalidArgumentError(f"At least 2 points are required, got {len(pairs)}")

        for i in range(1, len(pairs)):
            # written so that a nan x fails the check too
            if not pairs[i][0] > pairs[i - 1][0] + self._epsilon:
                raise InvalidArgumentError(
                    f"The points are not strictly increasing in x: x[{i - 1}] = {pairs[i - 1][0]}, "
                    f"x[{i}] = {pairs[i][0]}"
                )

        return pairs

    def _checkIndex(self, index) -> int:
        index = operator.index(index)
        if index < 0 or index >= self.getPointsCount():
            raise PointIndexOutOfRangeError(index, self.getPointsCount())
        return index

    def _checkOrder(self, x: float, prevX: float = None, nextX: float = None):
        """
        Check that a new x fits strictly between the x values of its neighbours.

        ``None`` means there is no neighbour on that side.
        """
        if math.isnan(x):
            raise InvalidPointError("The x coordinate of a point cannot be nan")
        if prevX is not None and x <= prevX + self._epsilon:
            raise InvalidPointError(f"The new x ({x}) must be greater than the previous x ({prevX})")
        if nextX is not None and x >= nextX - self._epsilon:
            raise InvalidPointError(f"The new x ({x}) must be less than the next x ({nextX})")

    def _outsideDomain(self, x: float) -> bool:
        """True if ``x`` is nan or further than epsilon outside of the domain."""
        return (
            math.isnan(x)
            or x < self.getLeftDomainBorder() - self._epsilon
            or x > self.getRightDomainBorder() + self._epsilon
        )

    def _interpolate(self, x, x1, y1, x2, y2) -> float:
        """
        Evaluate at ``x`` on the segment between two neighbouring knots.

        A knot's own y is returned exactly when ``x`` is within epsilon of it.
        """
        if abs(x - x1) < self._epsilon:
            return y1
        if abs(x - x2) < self._epsilon:
            return y2

        return y1 + (y2 - y1) * (x - x1) / (x2 - x1)

    def _load(self, pairs: list):
        """
        Replace the storage with the given validated (x, y) pairs.

        This is also how unpickling rebuilds a function, so it must not rely on ``__init__`` having
        run, apart from ``self._epsilon``.
        """
        raise NotImplementedError()

    def _pairs(self):
        """Yield the (x, y) of every point, in order."""
        raise NotImplementedError()

    def getPointsCount(self) -> int:
        raise NotImplementedError()

    def getPoint(self, index: int) -> FunctionPoint:
        raise NotImplementedError()

    def setPoint(self, index: int, point):
        raise NotImplementedError()

    def getPointX(self, index: int) -> float:
        raise NotImplementedError()

    def setPointX(self, index: int, x: float):
        raise NotImplementedError()

    def getPointY(self, index: int) -> float:
        raise NotImplementedError()

    def setPointY(self, index: int, y: float):
        raise NotImplementedError()

    def deletePoint(self, index: int):
        raise NotImplementedError()

    def addPoint(self, point):
        raise NotImplementedError()

    def clone(self):
        """Return an independent deep copy, with the same storage strategy and tolerance."""
        return type(self)(list(self._pairs()), epsilon=self._epsilon)

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    def __getstate__(self):
        return {"epsilon": self._epsilon, "points": list(self._pairs())}

    def __setstate__(self, state):
        self._epsilon = state["epsilon"]
        self._load(state["points"])

    def __len__(self):
        return self.getPointsCount()

    def __iter__(self):
        """Iterate over independent copies of the points, in order."""
        for x, y in self._pairs():
            yield FunctionPoint(x, y)

    def __eq__(self, other):
        """
        Two tabulated functions are equal if they have the same number of points, and each pair of
        corresponding points agrees in both x and y within the larger of the two epsilons.

        This works across storage strategies, through indexed access. Subclasses add faster paths
        for comparisons with their own kind.
        """
        if self is other:
            return True
        if not isinstance(other, TabulatedFunction):
            return NotImplemented

        count = self.getPointsCount()
        if count != other.getPointsCount():
            return False

        eps = max(self._epsilon, other.epsilon)
        for i in range(count):
            if not self.getPoint(i).isClose(other.getPoint(i), eps):
                return False

        return True

    def __hash__(self):
        """
        Combine the point count and the bits of every x and y, in order.

        Both storage strategies hash identical points identically. Equal functions whose values
        differ by less than epsilon can still hash differently.
        """
        result = self.getPointsCount()
        for x, y in self._pairs():
            result = (31 * result + _foldBits(x)) & _HASH_MASK
            result = (31 * result + _foldBits(y)) & _HASH_MASK
        return result

    def __str__(self):
        return "{" + ", ".join(str(p) for p in self) + "}"

    def __repr__(self):
        return (
            f"<{self.__class__.__name__} {self.getPointsCount()} points "
            f"[{self.getLeftDomainBorder()}, {self.getRightDomainBorder()}]>"
        )
