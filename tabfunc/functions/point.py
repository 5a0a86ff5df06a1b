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

"""A single (x, y) point of a tabulated function."""


class FunctionPoint:
    """
    A single (x, y) point of a tabulated function.

    Both coordinates are independent and mutable. Points are values: tabulated functions copy them on
    the way in and on the way out, so changing a point you hold never changes a function.
    """

    def __init__(self, x=0.0, y=0.0):
        """
        Constructor for FunctionPoint class.

        Parameters
        ----------
        x: float
            Independent variable
        y: float
            Dependent variable value at x
        """
        self.x = float(x)
        """Value of the independent variable."""

        self.y = float(y)
        """Value of the dependent variable."""

    def copy(self):
        """Return an independent point with the same coordinates."""
        return FunctionPoint(self.x, self.y)

    def isClose(self, other, epsilon: float) -> bool:
        """Returns True if both coordinates of ``other`` are within ``epsilon`` of this point's."""
        return abs(self.x - other.x) <= epsilon and abs(self.y - other.y) <= epsilon

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, FunctionPoint):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __str__(self):
        return f"({self.x:.3f}; {self.y:.3f})"

    def __repr__(self):
        """Provides string representation of FunctionPoint object."""
        return f"<FunctionPoint {self.x}, {self.y}>"
