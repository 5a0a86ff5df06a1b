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

"""A tabulated function that keeps its points in one contiguous, growable array."""

import math

import numpy as np

from tabfunc import runLog, settings
from tabfunc.functions.point import FunctionPoint
from tabfunc.functions.tabulatedFunction import TabulatedFunction, _asPair
from tabfunc.settings.globalSettings import CONF_DEFAULT_CAPACITY
from tabfunc.utils.customExceptions import InvalidPointError, InvariantViolationError

_X = 0
_Y = 1


class ArrayTabulatedFunction(TabulatedFunction):
    """
    A tabulated function stored in a numpy array.

    The points live in the first ``count`` rows of a ``(capacity, 2)`` float array; row i holds
    ``(x[i], y[i])``. The capacity starts at twice the number of points (but never below the
    ``defaultCapacity`` setting) and doubles whenever an insertion finds the array full. Random access
    is direct; insertion and deletion shift the tail of the array by one row.

    Examples
    --------
        >>> f = ArrayTabulatedFunction([(0, 0), (1, 1), (2, 4)])
        >>> f.getFunctionValue(1.5)
        2.5
    """

    def _load(self, pairs):
        capacity = max(2 * len(pairs), settings.getMasterCs()[CONF_DEFAULT_CAPACITY])
        self._points = np.zeros((capacity, 2))
        """Point storage; only the first ``self._count`` rows are meaningful."""

        self._count = len(pairs)
        """Number of points."""

        if pairs:
            self._points[: self._count] = pairs

    def _pairs(self):
        for x, y in self._points[: self._count].tolist():
            yield x, y

    def _grow(self):
        """Double the capacity, keeping the points."""
        capacity = 2 * len(self._points)
        runLog.debug(f"Growing {self.__class__.__name__} storage from {len(self._points)} to {capacity} points")
        points = np.zeros((capacity, 2))
        points[: self._count] = self._points[: self._count]
        self._points = points

    def getLeftDomainBorder(self) -> float:
        if self._count == 0:
            return math.nan
        return float(self._points[0, _X])

    def getRightDomainBorder(self) -> float:
        if self._count == 0:
            return math.nan
        return float(self._points[self._count - 1, _X])

    def getFunctionValue(self, x: float) -> float:
        """
        Evaluate the function by linear interpolation between the two knots around ``x``.

        Returns
        -------
        float
            The knot's y if ``x`` is within epsilon of a knot, the interpolated value inside the
            domain, and nan outside of it.
        """
        if self._count == 0 or self._outsideDomain(x):
            return math.nan

        eps = self._epsilon
        if abs(x - self._points[0, _X]) < eps:
            return float(self._points[0, _Y])
        if abs(x - self._points[self._count - 1, _X]) < eps:
            return float(self._points[self._count - 1, _Y])

        # the bracketing interval is found by a linear scan from the left
        for i in range(self._count - 1):
            x1, y1 = self._points[i].tolist()
            x2, y2 = self._points[i + 1].tolist()
            if x1 - eps <= x <= x2 + eps:
                return self._interpolate(x, x1, y1, x2, y2)

        return math.nan

    def getPointsCount(self) -> int:
        return self._count

    def getPoint(self, index: int) -> FunctionPoint:
        index = self._checkIndex(index)
        x, y = self._points[index].tolist()
        return FunctionPoint(x, y)

    def setPoint(self, index: int, point):
        """
        Replace the point at ``index``.

        Raises
        ------
        InvalidPointError
            If the new x is not strictly between the x values of the neighbouring points. The
            function is left unchanged.
        """
        index = self._checkIndex(index)
        x, y = _asPair(point)
        if abs(x - self._points[index, _X]) < self._epsilon:
            # same x, within tolerance
            self._points[index, _Y] = y
            return

        self._checkOrder(x, *self._neighborXs(index))
        self._points[index] = (x, y)

    def getPointX(self, index: int) -> float:
        index = self._checkIndex(index)
        return float(self._points[index, _X])

    def setPointX(self, index: int, x: float):
        index = self._checkIndex(index)
        x = float(x)
        if abs(x - self._points[index, _X]) < self._epsilon:
            return

        self._checkOrder(x, *self._neighborXs(index))
        self._points[index, _X] = x

    def getPointY(self, index: int) -> float:
        index = self._checkIndex(index)
        return float(self._points[index, _Y])

    def setPointY(self, index: int, y: float):
        index = self._checkIndex(index)
        self._points[index, _Y] = float(y)

    def _neighborXs(self, index):
        prevX = float(self._points[index - 1, _X]) if index > 0 else None
        nextX = float(self._points[index + 1, _X]) if index < self._count - 1 else None
        return prevX, nextX

    def deletePoint(self, index: int):
        """
        Remove the point at ``index``, shifting the later points one row to the left.

        Raises
        ------
        InvariantViolationError
            If the function only has two points left.
        """
        index = self._checkIndex(index)
        if self._count <= 2:
            raise InvariantViolationError("Cannot delete a point: a tabulated function needs at least 2 points")

        # numpy handles the overlapping slices
        self._points[index : self._count - 1] = self._points[index + 1 : self._count]
        self._points[self._count - 1] = 0.0
        self._count -= 1

    def addPoint(self, point):
        """
        Insert a point at the position that keeps the x values ordered.

        Raises
        ------
        InvalidPointError
            If a point with the same x (within epsilon) already exists. The function is left
            unchanged.
        """
        x, y = _asPair(point)
        if math.isnan(x):
            raise InvalidPointError("The x coordinate of a point cannot be nan")

        eps = self._epsilon
        index = 0
        while index < self._count and x > self._points[index, _X] + eps:
            index += 1

        if index < self._count and abs(x - self._points[index, _X]) <= eps:
            raise InvalidPointError(f"A point with x = {x} already exists")

        if self._count == len(self._points):
            self._grow()

        self._points[index + 1 : self._count + 1] = self._points[index : self._count]
        self._points[index] = (x, y)
        self._count += 1

    def __eq__(self, other):
        if isinstance(other, ArrayTabulatedFunction):
            if self is other:
                return True
            if self._count != other._count:
                return False
            diff = np.abs(self._points[: self._count] - other._points[: other._count])
            return bool(np.all(diff <= max(self._epsilon, other._epsilon)))

        return TabulatedFunction.__eq__(self, other)

    __hash__ = TabulatedFunction.__hash__
