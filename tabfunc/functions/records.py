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
Record readers and writers for the tabulated function stream formats.

Notes
-----
The methods of these records have ``rw`` prefixes, meaning the same method is used for both reading
and writing. A format is then described once, as a sequence of ``rw`` calls, and that sequence both
parses and serializes it. When writing, the value passed in is written and returned; when reading,
the value passed in is ignored (``None`` is customary) and the value read is returned.

Two encodings are provided:

* binary: big-endian 32-bit signed integers and 64-bit IEEE-754 doubles, with no padding, tags or
  record boundaries.
* text (ASCII): whitespace separated tokens. Floats are written with ``repr`` so that reading them
  back gives the exact same value.
"""

import io
import struct

_INT_FORMAT = ">i"
_DOUBLE_FORMAT = ">d"


class IORecord:
    """
    A sequence of values read from or written to a stream.

    Use as a context manager: writers collect their output and only write it to the stream when
    the record is closed without an error.
    """

    def __init__(self, stream):
        self._stream = stream

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is not None:
            return
        self.close()

    def open(self):
        """Abstract method for opening the record."""
        raise NotImplementedError()

    def close(self):
        """Abstract method for closing the record."""
        raise NotImplementedError()

    def rwInt(self, val):
        """Abstract method for reading or writing a 32-bit integer."""
        raise NotImplementedError()

    def rwDouble(self, val):
        """Abstract method for reading or writing a double precision floating point value."""
        raise NotImplementedError()

    def endLine(self):
        """End the current line. Only the text encoding has lines; elsewhere this does nothing."""


class BinaryRecordReader(IORecord):
    """Reads big-endian binary values sequentially."""

    _intSize = struct.calcsize(_INT_FORMAT)
    _doubleSize = struct.calcsize(_DOUBLE_FORMAT)

    def open(self):
        pass

    def close(self):
        pass

    def _readBytes(self, numBytes):
        data = self._stream.read(numBytes)
        if len(data) < numBytes:
            raise EOFError(f"Expected {numBytes} more bytes, but the stream ended after {len(data)}")
        return data

    def rwInt(self, val):
        (i,) = struct.unpack(_INT_FORMAT, self._readBytes(self._intSize))
        return i

    def rwDouble(self, val):
        (d,) = struct.unpack(_DOUBLE_FORMAT, self._readBytes(self._doubleSize))
        return d


class BinaryRecordWriter(IORecord):
    """Writes big-endian binary values sequentially."""

    def __init__(self, stream):
        IORecord.__init__(self, stream)
        self.data = None

    def open(self):
        self.data = []

    def close(self):
        self._stream.write(b"".join(self.data))
        self.data = None

    def rwInt(self, val):
        self.data.append(struct.pack(_INT_FORMAT, val))
        return val

    def rwDouble(self, val):
        self.data.append(struct.pack(_DOUBLE_FORMAT, val))
        return val


class AsciiRecordReader(IORecord):
    """
    Reads whitespace separated tokens from a text stream.

    Line breaks carry no meaning when reading; any whitespace separates two values. The stream is
    read one character at a time and a token is complete at the first whitespace character after
    it, so nothing past that character is consumed. Several records can share one stream, or one
    line.
    """

    def open(self):
        pass

    def close(self):
        pass

    def _nextToken(self):
        char = self._stream.read(1)
        while char and char.isspace():
            char = self._stream.read(1)
        if not char:
            raise EOFError("The stream ended before all values were read")

        chars = []
        while char and not char.isspace():
            chars.append(char)
            char = self._stream.read(1)

        return "".join(chars)

    def rwInt(self, val):
        """Read an integer; it may be written as a real with no fractional part, e.g. ``2.0``."""
        token = self._nextToken()
        value = float(token)
        if not value.is_integer():
            raise ValueError(f"Expected an integer, got {token!r}")
        return int(value)

    def rwDouble(self, val):
        return float(self._nextToken())


class AsciiRecordWriter(IORecord):
    """Writes space separated tokens to a text stream."""

    def __init__(self, stream):
        IORecord.__init__(self, stream)
        self.data = None
        self._lineStarted = False

    def open(self):
        self.data = io.StringIO()
        self._lineStarted = False

    def close(self):
        self._stream.write(self.data.getvalue())
        self.data = None

    def _writeToken(self, token):
        if self._lineStarted:
            self.data.write(" ")
        self.data.write(token)
        self._lineStarted = True

    def rwInt(self, val):
        self._writeToken(str(int(val)))
        return val

    def rwDouble(self, val):
        self._writeToken(repr(float(val)))
        return val

    def endLine(self):
        self.data.write("\n")
        self._lineStarted = False
