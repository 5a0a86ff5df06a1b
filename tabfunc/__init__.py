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
Welcome to tabfunc, a library of tabulated functions of one variable.

A tabulated function is a finite, strictly ordered sequence of (x, y) points. It can be evaluated
anywhere inside its domain by piecewise-linear interpolation, edited in place (points added,
deleted or moved) and written to or read from binary and text streams.

The package is laid out as follows:

* :py:mod:`tabfunc.functions` holds the point type, the evaluable ``Function`` contract, the two
  storage strategies (:py:class:`~tabfunc.functions.arrayTabulatedFunction.ArrayTabulatedFunction`
  and :py:class:`~tabfunc.functions.linkedListTabulatedFunction.LinkedListTabulatedFunction`) and
  the factory/codec functions in :py:mod:`tabfunc.functions.tabulatedFunctions`.
* :py:mod:`tabfunc.settings` holds the configuration settings (tolerance, default capacity,
  verbosity), loadable from YAML.
* :py:mod:`tabfunc.runLog` is the package-wide logger.
* :py:mod:`tabfunc.utils.customExceptions` holds the exception types raised by this package.
"""
from tabfunc import runLog
from tabfunc.meta import __version__
from tabfunc.functions.point import FunctionPoint
from tabfunc.functions.function import Function
from tabfunc.functions.tabulatedFunction import TabulatedFunction
from tabfunc.functions.arrayTabulatedFunction import ArrayTabulatedFunction
from tabfunc.functions.linkedListTabulatedFunction import LinkedListTabulatedFunction
from tabfunc.functions import tabulatedFunctions
