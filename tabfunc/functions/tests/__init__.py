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

"""Generic testing tools for the tabulated functions."""

import copy
import math
import pickle

from tabfunc import settings
from tabfunc.functions.point import FunctionPoint
from tabfunc.settings.globalSettings import CONF_EPSILON
from tabfunc.utils.customExceptions import (
    InvalidArgumentError,
    InvalidPointError,
    InvariantViolationError,
    PointIndexOutOfRangeError,
)

SQUARES = [(0.0, 0.0), (1.0, 1.0), (2.0, 4.0)]


class TabulatedFunctionContract:
    """
    Tests every storage strategy has to pass.

    Mix this into a ``unittest.TestCase`` and set ``functionClass`` to the strategy under test.
    """

    functionClass = None

    def _make(self, points=SQUARES, **kwargs):
        return self.functionClass(points, **kwargs)

    def _assertPoints(self, func, expected):
        self.assertEqual([tuple(p) for p in func], expected)

    # construction

    def test_construction(self):
        f = self._make()
        self.assertEqual(f.getPointsCount(), 3)
        self.assertEqual(f.getLeftDomainBorder(), 0.0)
        self.assertEqual(f.getRightDomainBorder(), 2.0)
        self._assertPoints(f, SQUARES)

    def test_constructionFromPoints(self):
        points = [FunctionPoint(x, y) for x, y in SQUARES]
        f = self._make(points)
        self._assertPoints(f, SQUARES)

        # the points are copied on the way in
        points[0].y = 100.0
        self.assertEqual(f.getPointY(0), 0.0)

    def test_constructionFromGenerator(self):
        f = self._make((x, x * x) for x in range(5))
        self.assertEqual(f.getPointsCount(), 5)
        self.assertEqual(f.getPointY(4), 16.0)

    def test_fromPointsCount(self):
        f = self.functionClass.fromPointsCount(0.0, 1.0, 3)
        self.assertIsInstance(f, self.functionClass)
        self._assertPoints(f, [(0.0, 0.0), (0.5, 0.0), (1.0, 0.0)])

    def test_fromValues(self):
        f = self.functionClass.fromValues(-1.0, 1.0, [1.0, 0.0, 1.0, 4.0, 9.0])
        self.assertIsInstance(f, self.functionClass)
        self._assertPoints(f, [(-1.0, 1.0), (-0.5, 0.0), (0.0, 1.0), (0.5, 4.0), (1.0, 9.0)])

    def test_tooFewPoints(self):
        with self.assertRaises(InvalidArgumentError):
            self._make([])
        with self.assertRaises(InvalidArgumentError):
            self._make([(0.0, 1.0)])
        with self.assertRaises(InvalidArgumentError):
            self.functionClass.fromPointsCount(0.0, 1.0, 1)
        with self.assertRaises(InvalidArgumentError):
            self.functionClass.fromValues(0.0, 1.0, [3.0])
        with self.assertRaises(InvalidArgumentError):
            self.functionClass.fromValues(0.0, 1.0, [[1.0, 2.0], [3.0, 4.0]])

    def test_invertedBorders(self):
        with self.assertRaises(InvalidArgumentError):
            self.functionClass.fromPointsCount(1.0, 0.0, 3)
        with self.assertRaises(InvalidArgumentError):
            self.functionClass.fromPointsCount(1.0, 1.0, 3)
        with self.assertRaises(InvalidArgumentError):
            self.functionClass.fromValues(2.0, -2.0, [1.0, 2.0])

    def test_unorderedPoints(self):
        with self.assertRaises(InvalidArgumentError):
            self._make([(0.0, 0.0), (2.0, 1.0), (1.0, 2.0)])
        with self.assertRaises(InvalidArgumentError):
            self._make([(0.0, 0.0), (1.0, 1.0), (1.0, 2.0)])
        with self.assertRaises(InvalidArgumentError):
            self._make([(0.0, 0.0), (1.0, 1.0), (1.0 + 1e-12, 2.0)])
        with self.assertRaises(InvalidArgumentError):
            self._make([(0.0, 0.0), (math.nan, 1.0)])

    def test_invalidArgumentIsValueError(self):
        with self.assertRaises(ValueError):
            self._make([(0.0, 0.0)])

    def test_epsilonFromSettings(self):
        original = settings.getMasterCs()
        settings.setMasterCs(original.modified({CONF_EPSILON: 1e-3}))
        try:
            f = self._make()
            with self.assertRaises(InvalidArgumentError):
                self._make([(0.0, 0.0), (0.0005, 1.0)])
        finally:
            settings.setMasterCs(original)

        self.assertEqual(f.epsilon, 1e-3)
        # a function keeps the tolerance it was built with
        self.assertEqual(f.clone().epsilon, 1e-3)
        with self.assertRaises(InvalidPointError):
            f.addPoint((1.0005, 0.0))

    def test_explicitEpsilon(self):
        f = self._make([(0.0, 0.0), (0.5, 1.0)], epsilon=0.1)
        self.assertEqual(f.epsilon, 0.1)
        with self.assertRaises(InvalidArgumentError):
            self._make([(0.0, 0.0), (0.05, 1.0)], epsilon=0.1)

    # evaluation

    def test_valueAtKnots(self):
        f = self._make([(-1.0, 3.5), (0.25, -2.0), (1.0, 7.0), (10.0, 0.125)])
        for p in f:
            self.assertEqual(f.getFunctionValue(p.x), p.y)

    def test_valueBetweenKnots(self):
        f = self._make()
        self.assertEqual(f.getFunctionValue(0.5), 0.5)
        self.assertEqual(f.getFunctionValue(1.5), 2.5)
        self.assertAlmostEqual(f.getFunctionValue(0.25), 0.25)
        self.assertAlmostEqual(f.getFunctionValue(1.9), 3.7)

    def test_valueIsAffineBetweenKnots(self):
        f = self._make([(0.0, 2.0), (4.0, -6.0), (5.0, 0.0)])
        for i in range(1, 40):
            x = i * 0.1
            self.assertAlmostEqual(f.getFunctionValue(x), 2.0 - 2.0 * x)
        self.assertAlmostEqual(f.getFunctionValue(4.5), -3.0)

    def test_valueOutsideDomain(self):
        f = self._make()
        self.assertTrue(math.isnan(f.getFunctionValue(-1.0)))
        self.assertTrue(math.isnan(f.getFunctionValue(2.001)))
        self.assertTrue(math.isnan(f.getFunctionValue(-1e-9)))
        self.assertTrue(math.isnan(f.getFunctionValue(math.nan)))
        self.assertTrue(math.isnan(f.getFunctionValue(math.inf)))

    def test_valueNearBorders(self):
        f = self._make()
        self.assertEqual(f.getFunctionValue(-1e-11), 0.0)
        self.assertEqual(f.getFunctionValue(2.0 + 1e-11), 4.0)
        self.assertEqual(f.getFunctionValue(1.0 - 1e-11), 1.0)

    def test_isAFunction(self):
        f = self._make()
        self.assertEqual(repr(f), f"<{self.functionClass.__name__} 3 points [0.0, 2.0]>")

    # indexed access

    def test_getPoint(self):
        f = self._make()
        p = f.getPoint(1)
        self.assertEqual(p, FunctionPoint(1.0, 1.0))

        # a copy is returned
        p.y = 42.0
        self.assertEqual(f.getPointY(1), 1.0)

    def test_getPointXY(self):
        f = self._make()
        self.assertEqual([f.getPointX(i) for i in range(3)], [0.0, 1.0, 2.0])
        self.assertEqual([f.getPointY(i) for i in range(3)], [0.0, 1.0, 4.0])

    def test_indexOutOfRange(self):
        f = self._make()
        calls = [
            lambda i: f.getPoint(i),
            lambda i: f.setPoint(i, (0.5, 0.5)),
            lambda i: f.getPointX(i),
            lambda i: f.setPointX(i, 0.5),
            lambda i: f.getPointY(i),
            lambda i: f.setPointY(i, 0.5),
            lambda i: f.deletePoint(i),
        ]
        for call in calls:
            for index in (-1, 3, 100):
                with self.assertRaises(PointIndexOutOfRangeError) as cm:
                    call(index)
                self.assertEqual(cm.exception.index, index)
                self.assertEqual(cm.exception.count, 3)

        self._assertPoints(f, SQUARES)

    def test_indexOutOfRangeIsIndexError(self):
        with self.assertRaises(IndexError):
            self._make().getPoint(3)

    # setters

    def test_setPoint(self):
        f = self._make()
        f.setPoint(1, FunctionPoint(1.5, 3.0))
        self._assertPoints(f, [(0.0, 0.0), (1.5, 3.0), (2.0, 4.0)])

        f.setPoint(0, (-3.0, 1.0))
        f.setPoint(2, (7.0, 2.0))
        self._assertPoints(f, [(-3.0, 1.0), (1.5, 3.0), (7.0, 2.0)])
        self.assertEqual(f.getLeftDomainBorder(), -3.0)
        self.assertEqual(f.getRightDomainBorder(), 7.0)

    def test_setPointOutOfOrder(self):
        f = self._make()
        for point in [(2.0, 9.0), (-0.5, 9.0), (0.0, 9.0), (3.0, 9.0), (math.nan, 9.0)]:
            with self.assertRaises(InvalidPointError):
                f.setPoint(1, point)
        with self.assertRaises(InvalidPointError):
            f.setPoint(0, (1.0, 9.0))
        with self.assertRaises(InvalidPointError):
            f.setPoint(2, (1.0 + 1e-12, 9.0))

        self._assertPoints(f, SQUARES)

    def test_setPointSameX(self):
        f = self._make()
        f.setPoint(1, (1.0 + 1e-12, 8.0))
        self._assertPoints(f, [(0.0, 0.0), (1.0, 8.0), (2.0, 4.0)])

    def test_setPointX(self):
        f = self._make()
        f.setPointX(1, 0.5)
        self._assertPoints(f, [(0.0, 0.0), (0.5, 1.0), (2.0, 4.0)])
        f.setPointX(2, 10.0)
        self.assertEqual(f.getRightDomainBorder(), 10.0)

    def test_setPointXBeforePrevious(self):
        f = self._make()
        with self.assertRaises(InvalidPointError):
            f.setPointX(1, -1.0)
        self.assertEqual(f.getPoint(1), FunctionPoint(1.0, 1.0))

        with self.assertRaises(InvalidPointError):
            f.setPointX(1, 2.5)
        with self.assertRaises(InvalidPointError):
            f.setPointX(0, 1.0)
        self._assertPoints(f, SQUARES)

    def test_setPointY(self):
        f = self._make()
        f.setPointY(2, -4.0)
        self.assertEqual(f.getPointY(2), -4.0)
        self.assertEqual(f.getFunctionValue(1.5), -1.5)
        self.assertEqual(f.getPointX(2), 2.0)

    # insertion and deletion

    def test_deletePoint(self):
        f = self._make([(0.0, 0.0), (1.0, 1.0), (2.0, 4.0), (3.0, 9.0)])
        f.deletePoint(1)
        self._assertPoints(f, [(0.0, 0.0), (2.0, 4.0), (3.0, 9.0)])
        f.deletePoint(2)
        self._assertPoints(f, [(0.0, 0.0), (2.0, 4.0)])
        self.assertEqual(f.getRightDomainBorder(), 2.0)
        self.assertEqual(f.getFunctionValue(1.0), 2.0)

    def test_deleteBelowTwoPoints(self):
        f = self.functionClass.fromPointsCount(0.0, 1.0, 3)
        f.deletePoint(1)
        with self.assertRaises(InvariantViolationError):
            f.deletePoint(0)
        self._assertPoints(f, [(0.0, 0.0), (1.0, 0.0)])

        # the index is checked first
        with self.assertRaises(PointIndexOutOfRangeError):
            f.deletePoint(2)

    def test_addPoint(self):
        f = self._make()
        f.addPoint((0.5, 0.25))
        f.addPoint(FunctionPoint(-1.0, 1.0))
        f.addPoint((3.0, 9.0))
        f.addPoint([1.5, 2.25])
        self._assertPoints(f, [(-1.0, 1.0), (0.0, 0.0), (0.5, 0.25), (1.0, 1.0), (1.5, 2.25), (2.0, 4.0), (3.0, 9.0)])
        self.assertEqual(f.getLeftDomainBorder(), -1.0)
        self.assertEqual(f.getRightDomainBorder(), 3.0)
        self.assertEqual(f.getFunctionValue(-0.5), 0.5)

    def test_addDuplicatePoint(self):
        f = self._make()
        with self.assertRaises(InvalidPointError):
            f.addPoint((1.0, 5.0))
        self.assertEqual(f.getPointsCount(), 3)

        for x in (0.0, 2.0, 2.0 + 1e-11, 1.0 - 1e-11, math.nan):
            with self.assertRaises(InvalidPointError):
                f.addPoint((x, 5.0))
        self._assertPoints(f, SQUARES)

    def test_addThenDelete(self):
        f = self._make()
        original = f.clone()
        f.addPoint((1.25, -3.0))
        self.assertNotEqual(f, original)
        f.deletePoint(2)
        self.assertEqual(f, original)
        self._assertPoints(f, SQUARES)

    def test_addManyPoints(self):
        f = self._make([(0.0, 0.0), (1.0, 1.0)])
        for i in range(2, 100):
            f.addPoint((float(i), float(i * i)))
        for i in range(99):
            f.addPoint((i + 0.5, 0.0))

        self.assertEqual(f.getPointsCount(), 199)
        xs = [p.x for p in f]
        self.assertEqual(xs, sorted(xs))
        self.assertEqual(f.getPointY(198), 99.0 * 99.0)
        self.assertEqual(f.getPointX(101), 50.5)

    def test_deleteThenAdd(self):
        f = self._make([(float(i), 0.0) for i in range(6)])
        for _ in range(4):
            f.deletePoint(1)
        self._assertPoints(f, [(0.0, 0.0), (5.0, 0.0)])
        for i in range(1, 5):
            f.addPoint((float(i), float(i)))
        self._assertPoints(f, [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0), (4.0, 4.0), (5.0, 0.0)])

    # copies and comparison

    def test_clone(self):
        f = self._make()
        g = f.clone()
        self.assertIsInstance(g, self.functionClass)
        self.assertEqual(f, g)
        self.assertEqual(g.epsilon, f.epsilon)

        g.setPointY(0, 100.0)
        g.addPoint((5.0, 5.0))
        self._assertPoints(f, SQUARES)

    def test_copy(self):
        f = self._make()
        for g in (copy.copy(f), copy.deepcopy(f)):
            self.assertIsInstance(g, self.functionClass)
            self.assertEqual(f, g)
            g.deletePoint(0)
            self.assertEqual(f.getPointsCount(), 3)

    def test_pickle(self):
        f = self._make([(0.0, 0.0), (1.0, 1.0)], epsilon=1e-6)
        f.addPoint((0.5, 3.0))
        g = pickle.loads(pickle.dumps(f))
        self.assertIsInstance(g, self.functionClass)
        self.assertEqual(g.epsilon, 1e-6)
        self._assertPoints(g, [(0.0, 0.0), (0.5, 3.0), (1.0, 1.0)])
        g.addPoint((2.0, 2.0))
        self.assertEqual(g.getPointsCount(), 4)

    def test_equality(self):
        f = self._make()
        self.assertEqual(f, f)
        self.assertEqual(f, self._make())
        self.assertEqual(f, self._make([(0.0, 1e-11), (1.0 + 1e-11, 1.0), (2.0, 4.0)]))
        self.assertNotEqual(f, self._make([(0.0, 0.0), (1.0, 1.1), (2.0, 4.0)]))
        self.assertNotEqual(f, self._make([(0.0, 0.0), (1.5, 1.0), (2.0, 4.0)]))
        self.assertNotEqual(f, self._make([(0.0, 0.0), (1.0, 1.0)]))
        self.assertNotEqual(f, SQUARES)
        self.assertNotEqual(f, "f")

    def test_hash(self):
        f = self._make()
        self.assertEqual(hash(f), hash(self._make()))
        self.assertNotEqual(hash(f), hash(self._make([(0.0, 0.0), (1.0, 4.0), (2.0, 1.0)])))
        self.assertNotEqual(hash(f), hash(self._make([(0.0, 0.0), (2.0, 4.0)])))

        # negative zero hashes like zero
        self.assertEqual(hash(self._make([(-0.0, 1.0), (1.0, -0.0)])), hash(self._make([(0.0, 1.0), (1.0, 0.0)])))
        self.assertEqual(len({f, f.clone(), self._make()}), 1)

    def test_str(self):
        f = self._make([(0.0, 0.0), (1.5, -2.25)])
        self.assertEqual(str(f), "{(0.000; 0.000), (1.500; -2.250)}")

    def test_lenAndIter(self):
        f = self._make()
        self.assertEqual(len(f), 3)
        self.assertEqual(list(f), [FunctionPoint(x, y) for x, y in SQUARES])
        for p in f:
            p.x = 100.0
        self._assertPoints(f, SQUARES)
