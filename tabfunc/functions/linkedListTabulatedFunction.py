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
A tabulated function that keeps its points in a circular doubly-linked list.

The nodes do not reference each other directly. They live in an arena: parallel lists of x, y,
previous-node and next-node entries, where a node is just its slot number. Slot 0 is the sentinel. It
holds no point, sits both before the first node and after the last one, and is what the first node's
"previous" and the last node's "next" point at, so neither end of the list needs special casing. An
empty list is the sentinel pointing at itself. Slots freed by deletions are reused by later
insertions.
"""

import math

from tabfunc.functions.point import FunctionPoint
from tabfunc.functions.tabulatedFunction import TabulatedFunction, _asPair
from tabfunc.utils.customExceptions import InvalidPointError, InvariantViolationError

_HEAD = 0
"""Slot of the sentinel node."""


class LinkedListTabulatedFunction(TabulatedFunction):
    """
    A tabulated function stored in a circular doubly-linked list with a sentinel node.

    Indexed access walks the list from whichever end is nearer to the index. Insertion and deletion
    relink the two neighbouring nodes; nothing is shifted.
    """

    def _load(self, pairs):
        self._xs = [math.nan]
        self._ys = [math.nan]
        self._prev = [_HEAD]
        self._next = [_HEAD]
        self._free = []
        """Slots of deleted nodes, ready for reuse."""

        self._count = 0
        for x, y in pairs:
            self._addNodeToTail(x, y)

    def _newNode(self, x, y, prevNode, nextNode) -> int:
        if self._free:
            node = self._free.pop()
            self._xs[node] = x
            self._ys[node] = y
            self._prev[node] = prevNode
            self._next[node] = nextNode
        else:
            node = len(self._xs)
            self._xs.append(x)
            self._ys.append(y)
            self._prev.append(prevNode)
            self._next.append(nextNode)

        return node

    def _addNodeBefore(self, nextNode, x, y) -> int:
        """Link a new node in front of ``nextNode``, and return it."""
        prevNode = self._prev[nextNode]
        node = self._newNode(x, y, prevNode, nextNode)
        self._next[prevNode] = node
        self._prev[nextNode] = node
        self._count += 1
        return node

    def _addNodeToTail(self, x, y) -> int:
        return self._addNodeBefore(_HEAD, x, y)

    def _deleteNode(self, node):
        prevNode = self._prev[node]
        nextNode = self._next[node]
        self._next[prevNode] = nextNode
        self._prev[nextNode] = prevNode

        self._xs[node] = math.nan
        self._ys[node] = math.nan
        self._prev[node] = _HEAD
        self._next[node] = _HEAD
        self._free.append(node)
        self._count -= 1

    def _getNodeByIndex(self, index) -> int:
        """
        Find the node at ``index``.

        Indices in the first half are reached walking forward from the first node, the others
        walking backward from the sentinel.
        """
        index = self._checkIndex(index)
        if index < self._count // 2:
            node = self._next[_HEAD]
            for _ in range(index):
                node = self._next[node]
        else:
            node = _HEAD
            for _ in range(self._count - index):
                node = self._prev[node]

        return node

    def _nodes(self):
        node = self._next[_HEAD]
        while node != _HEAD:
            yield node
            node = self._next[node]

    def _pairs(self):
        for node in self._nodes():
            yield self._xs[node], self._ys[node]

    def _neighborXs(self, node):
        prevNode = self._prev[node]
        nextNode = self._next[node]
        prevX = self._xs[prevNode] if prevNode != _HEAD else None
        nextX = self._xs[nextNode] if nextNode != _HEAD else None
        return prevX, nextX

    def getLeftDomainBorder(self) -> float:
        if self._count == 0:
            return math.nan
        return self._xs[self._next[_HEAD]]

    def getRightDomainBorder(self) -> float:
        if self._count == 0:
            return math.nan
        return self._xs[self._prev[_HEAD]]

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
        node = self._next[_HEAD]
        nextNode = self._next[node]
        while nextNode != _HEAD:
            x1, x2 = self._xs[node], self._xs[nextNode]
            if x1 - eps <= x <= x2 + eps:
                return self._interpolate(x, x1, self._ys[node], x2, self._ys[nextNode])
            node = nextNode
            nextNode = self._next[node]

        return math.nan

    def getPointsCount(self) -> int:
        return self._count

    def getPoint(self, index: int) -> FunctionPoint:
        node = self._getNodeByIndex(index)
        return FunctionPoint(self._xs[node], self._ys[node])

    def setPoint(self, index: int, point):
        """
        Replace the point at ``index``.

        Raises
        ------
        InvalidPointError
            If the new x is not strictly between the x values of the neighbouring points. The
            function is left unchanged.
        """
        node = self._getNodeByIndex(index)
        x, y = _asPair(point)
        if abs(x - self._xs[node]) < self._epsilon:
            # same x, within tolerance
            self._ys[node] = y
            return

        self._checkOrder(x, *self._neighborXs(node))
        self._xs[node] = x
        self._ys[node] = y

    def getPointX(self, index: int) -> float:
        return self._xs[self._getNodeByIndex(index)]

    def setPointX(self, index: int, x: float):
        node = self._getNodeByIndex(index)
        x = float(x)
        if abs(x - self._xs[node]) < self._epsilon:
            return

        self._checkOrder(x, *self._neighborXs(node))
        self._xs[node] = x

    def getPointY(self, index: int) -> float:
        return self._ys[self._getNodeByIndex(index)]

    def setPointY(self, index: int, y: float):
        self._ys[self._getNodeByIndex(index)] = float(y)

    def deletePoint(self, index: int):
        """
        Unlink the node at ``index``.

        Raises
        ------
        InvariantViolationError
            If the function only has two points left.
        """
        node = self._getNodeByIndex(index)
        if self._count <= 2:
            raise InvariantViolationError("Cannot delete a point: a tabulated function needs at least 2 points")

        self._deleteNode(node)

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
        if self._count == 0 or x > self.getRightDomainBorder() + eps:
            self._addNodeToTail(x, y)
            return

        node = self._next[_HEAD]
        while node != _HEAD and x > self._xs[node] + eps:
            node = self._next[node]

        if node != _HEAD and abs(x - self._xs[node]) <= eps:
            raise InvalidPointError(f"A point with x = {x} already exists")

        self._addNodeBefore(node, x, y)

    def __eq__(self, other):
        if isinstance(other, LinkedListTabulatedFunction):
            if self is other:
                return True
            if self._count != other._count:
                return False

            eps = max(self._epsilon, other._epsilon)
            # walk both chains in lock-step
            for (x1, y1), (x2, y2) in zip(self._pairs(), other._pairs()):
                if not (abs(x1 - x2) <= eps and abs(y1 - y2) <= eps):
                    return False
            return True

        return TabulatedFunction.__eq__(self, other)

    __hash__ = TabulatedFunction.__hash__
