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

"""Generic class for a real function of one variable, defined on a closed domain."""

class Function:
    """
    A base class for functions that can be evaluated at a point.

    The word "function" here is used in the mathematical sense: a rule that maps an x inside a closed
    domain ``[left, right]`` onto a y. Outside that domain the value is undefined, and
    ``getFunctionValue`` returns ``nan`` rather than raising.

    Any object with ``getLeftDomainBorder``, ``getRightDomainBorder`` and ``getFunctionValue``
    methods can be used where a Function is expected; subclassing is a convenience.
    """

    def getLeftDomainBorder(self) -> float:
        """Returns the smallest x at which this function is defined."""
        raise NotImplementedError()

    def getRightDomainBorder(self) -> float:
        """Returns the largest x at which this function is defined."""
        raise NotImplementedError()

    def getFunctionValue(self, x: float) -> float:
        """
        Evaluate the function.

        Parameters
        ----------
        x: float
            independent variable value

        Returns
        -------
        float
            function value at x, or nan if x is outside of the domain
        """
        raise NotImplementedError()

    def __repr__(self):
        """Provides string representation of Function object."""
        return f"<{self.__class__.__name__} [{self.getLeftDomainBorder()}, {self.getRightDomainBorder()}]>"
