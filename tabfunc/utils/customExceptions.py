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
Globally accessible exception definitions for better granularity on exception behavior and exception
handling behavior.

Every error raised by a tabulated function is local and recoverable: it is reported synchronously to
the caller, and the function it was raised from is left exactly as it was before the call.
"""


class InvalidArgumentError(ValueError):
    """
    Malformed input while building a tabulated function.

    Raised for too few points, a non-increasing sequence of x values, an inverted or empty domain, or
    a non-positive point count. It is always detected before anything is built.
    """

    def __init__(self, msg):
        ValueError.__init__(self, msg)


class PointIndexOutOfRangeError(IndexError):
    """A point index outside of ``[0, count)``."""

    def __init__(self, index, count):
        self.index = index
        """The offending index."""

        self.count = count
        """The number of points at the time of the call; valid indices are below this."""

        IndexError.__init__(self, f"Point index {index} is out of range [0, {count - 1}]")


class InvalidPointError(ValueError):
    """An edit that would break the strict ordering of x values, or introduce a duplicate x."""

    def __init__(self, msg):
        ValueError.__init__(self, msg)


class InvariantViolationError(RuntimeError):
    """An edit that would leave a tabulated function with fewer than two points."""

    def __init__(self, msg):
        RuntimeError.__init__(self, msg)


# ---------------------------------------------------


class SettingException(Exception):
    """Standardize behavior of setting-family errors."""

    def __init__(self, msg):
        Exception.__init__(self, msg)


class NonexistentSetting(SettingException):
    """Exception raised when a non existent setting is asked for."""

    def __init__(self, setting):
        SettingException.__init__(self, f"Attempted to locate non-existent setting {setting}.")


class InvalidSettingsFileError(SettingException):
    """Not a valid settings file."""

    def __init__(self, path, customMsgEnd=""):
        msg = f"Attempted to load an invalid settings file from: {path}. "
        msg += customMsgEnd

        SettingException.__init__(self, msg)
