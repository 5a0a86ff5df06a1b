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

r"""
Building tabulated functions from other functions, and reading and writing them from streams.

Both stream formats hold the number of points followed by the (x, y) of every point in order:

* binary (:py:func:`outputTabulatedFunction` / :py:func:`inputTabulatedFunction`): a big-endian
  32-bit signed integer count, then ``count`` pairs of big-endian 64-bit doubles.
* text (:py:func:`writeTabulatedFunction` / :py:func:`readTabulatedFunction`): the count on the
  first line, then one ``x y`` pair per line.

Functions read from a stream are always :py:class:`ArrayTabulatedFunction` objects, and go through
the same validation as any other construction.

Examples
--------
    >>> buf = io.StringIO()
    >>> writeTabulatedFunction(ArrayTabulatedFunction([(0, 1), (2, 3)]), buf)
    >>> buf.getvalue()
    '2\n0.0 1.0\n2.0 3.0\n'
"""

import itertools
import os

from tabfunc import runLog
from tabfunc.functions import records
from tabfunc.functions.arrayTabulatedFunction import ArrayTabulatedFunction
from tabfunc.functions.tabulatedFunction import uniformGrid
from tabfunc.utils.customExceptions import InvalidArgumentError


def tabulate(function, leftX: float, rightX: float, pointsCount: int) -> ArrayTabulatedFunction:
    """
    Sample a function at ``pointsCount`` uniformly spaced x values from ``leftX`` to ``rightX``.

    Parameters
    ----------
    function: Function
        Anything with ``getLeftDomainBorder``, ``getRightDomainBorder`` and ``getFunctionValue``.
    leftX, rightX: float
        The sampled interval; it must lie inside the function's domain.
    pointsCount: int
        Number of samples, at least 2.

    Raises
    ------
    InvalidArgumentError
        If ``leftX >= rightX``, if the interval is not inside the domain of the function, or if
        ``pointsCount < 2``.
    """
    if leftX >= rightX:
        raise InvalidArgumentError(f"The left border ({leftX}) must be less than the right border ({rightX})")
    if leftX < function.getLeftDomainBorder() or rightX > function.getRightDomainBorder():
        raise InvalidArgumentError(
            f"[{leftX}, {rightX}] is outside the domain of {function}: "
            f"[{function.getLeftDomainBorder()}, {function.getRightDomainBorder()}]"
        )
    if pointsCount < 2:
        raise InvalidArgumentError(f"At least 2 points are required, got {pointsCount}")

    runLog.extra(f"Tabulating {function} over [{leftX}, {rightX}] with {pointsCount} points")
    xs = uniformGrid(leftX, rightX, pointsCount).tolist()
    return ArrayTabulatedFunction([(x, function.getFunctionValue(x)) for x in xs])


def _rwPoints(record, function=None):
    """
    Read or write a point count and the points.

    Notes
    -----
    When writing, ``function`` is the tabulated function to write and is returned. When reading,
    it is ``None`` and the function read is returned.
    """
    reading = function is None
    if reading:
        count = record.rwInt(None)
        # no list up front, a corrupt count must not allocate anything
        points = itertools.repeat((None, None), max(count, 0))
    else:
        count = record.rwInt(function.getPointsCount())
        points = ((p.x, p.y) for p in function)
    record.endLine()

    pairs = []
    for x, y in points:
        pairs.append((record.rwDouble(x), record.rwDouble(y)))
        record.endLine()

    if not reading:
        return function

    runLog.debug(f"Read {count} points")
    return ArrayTabulatedFunction(pairs)


def outputTabulatedFunction(function, out):
    """Write a tabulated function to a binary stream, and leave the stream open."""
    runLog.debug(f"Writing {function} in binary")
    with records.BinaryRecordWriter(out) as record:
        _rwPoints(record, function)


def inputTabulatedFunction(inp) -> ArrayTabulatedFunction:
    """
    Read a tabulated function from a binary stream.

    Raises
    ------
    EOFError
        If the stream ends before all the points were read.
    InvalidArgumentError
        If the points read do not make a valid tabulated function.
    """
    with records.BinaryRecordReader(inp) as record:
        return _rwPoints(record)


def writeTabulatedFunction(function, out):
    """Write a tabulated function to a text stream, and leave the stream open."""
    runLog.debug(f"Writing {function} as text")
    with records.AsciiRecordWriter(out) as record:
        _rwPoints(record, function)


def readTabulatedFunction(inp) -> ArrayTabulatedFunction:
    """
    Read a tabulated function from a text stream.

    Raises
    ------
    EOFError
        If the stream ends before all the points were read.
    ValueError
        If a token is not a number, or the point count is not a whole number. ``InvalidArgumentError`` is the special case of numbers that do
        not make a valid tabulated function.
    """
    with records.AsciiRecordReader(inp) as record:
        return _rwPoints(record)


class TabulatedFunctionStream:
    """
    Reads and writes tabulated function files.

    The stream opens the file on ``__enter__`` and closes it on ``__exit__``. The classmethods
    :py:meth:`readBinary`, :py:meth:`readAscii`, :py:meth:`writeBinary` and :py:meth:`writeAscii`
    wrap a whole read or write.
    """

    _fileModes = {
        "rb": records.BinaryRecordReader,
        "wb": records.BinaryRecordWriter,
        "r": records.AsciiRecordReader,
        "w": records.AsciiRecordWriter,
    }

    def __init__(self, fileName, fileMode):
        """
        Parameters
        ----------
        fileName : str
            name of the file to be read or written
        fileMode : str
            the file mode, i.e. 'w' for writing text, 'r' for reading text, 'wb' for writing
            binary, and 'rb' for reading binary.
        """
        if fileMode not in self._fileModes:
            raise KeyError(f"{fileMode} not in {list(self._fileModes.keys())}")

        self._fileName = fileName
        self._fileMode = fileMode
        self._stream = None

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._fileName}>"

    def __enter__(self):
        try:
            self._stream = open(self._fileName, self._fileMode)
        except IOError:
            runLog.error(f"Cannot open {self._fileName} in {os.getcwd()}")
            raise
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self._stream.close()
        self._stream = None

    def createRecord(self):
        return self._fileModes[self._fileMode](self._stream)

    def readWrite(self, function=None):
        with self.createRecord() as record:
            return _rwPoints(record, function)

    @classmethod
    def readBinary(cls, fileName: str) -> ArrayTabulatedFunction:
        """Read a tabulated function from a binary file."""
        return cls._readWrite(None, fileName, "rb")

    @classmethod
    def readAscii(cls, fileName: str) -> ArrayTabulatedFunction:
        """Read a tabulated function from a text file."""
        return cls._readWrite(None, fileName, "r")

    @classmethod
    def writeBinary(cls, function, fileName: str):
        """Write a tabulated function to a binary file."""
        return cls._readWrite(function, fileName, "wb")

    @classmethod
    def writeAscii(cls, function, fileName: str):
        """Write a tabulated function to a text file."""
        return cls._readWrite(function, fileName, "w")

    @classmethod
    def _readWrite(cls, function, fileName, fileMode):
        runLog.extra(f"{'Reading' if function is None else 'Writing'} tabulated function file {fileName}")
        with cls(fileName, fileMode) as rw:
            return rw.readWrite(function)
