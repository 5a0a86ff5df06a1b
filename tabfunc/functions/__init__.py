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
The tabulated functions, and the ``Function`` contract they and other evaluable functions share.

* :py:mod:`~tabfunc.functions.point`: the (x, y) point type.
* :py:mod:`~tabfunc.functions.function`: the evaluable ``Function`` base class.
* :py:mod:`~tabfunc.functions.tabulatedFunction`: the common base of the storage strategies.
* :py:mod:`~tabfunc.functions.arrayTabulatedFunction` and
  :py:mod:`~tabfunc.functions.linkedListTabulatedFunction`: the two storage strategies.
* :py:mod:`~tabfunc.functions.tabulatedFunctions`: tabulation, and binary and text streams.
"""
