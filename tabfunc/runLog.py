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
This module handles logging of console output (e.g. warnings, information, errors) for tabfunc.

The default way of calling the global tabfunc logger is to just import it:

.. code::

    from tabfunc import runLog

You can then log things at any of the tabfunc levels:

.. code::

    runLog.info('information here')
    runLog.extra('more detail than info, less than debug')

Or change the log level the same way:

.. code::

    runLog.setVerbosity('debug')

"""
import collections
import logging
import sys

STDOUT_LOGGER_NAME = "TABFUNC"


class _RunLog:
    """
    Handles all the logging.

    Messages are printed to stdout, but formatted like log statements, with a short level tag in
    front of every line.
    """

    def __init__(self):
        self._verbosity = logging.INFO
        self.logLevels = collections.OrderedDict(
            [
                ("debug", (logging.DEBUG, "[dbug] ")),
                ("extra", (15, "[xtra] ")),
                ("info", (logging.INFO, "[info] ")),
                ("warning", (logging.WARNING, "[warn] ")),
                ("error", (logging.ERROR, "[err ] ")),
            ]
        )
        self._logLevelNumbers = sorted([lvl[0] for lvl in self.logLevels.values()])

        # the level names printed in front of each message are the short tags
        for logValue, shortLogString in self.logLevels.values():
            logging.addLevelName(logValue, shortLogString)

        self.logger = RunLogger(STDOUT_LOGGER_NAME)
        self.setVerbosity(self._verbosity)

    def log(self, msgType, msg):
        """
        This is a wrapper around logger.log() that does most of the work and is used by all message
        passers (e.g. info, warning, etc.).
        """
        self.logger.log(self.logLevels[msgType][0], str(msg))

    def getLogVerbosityRank(self, level):
        """Return integer verbosity rank given the string verbosity name."""
        try:
            return self.logLevels[level][0]
        except KeyError:
            logStrs = list(self.logLevels.keys())
            raise KeyError(f"{level} is not a valid verbosity level: {logStrs}")

    def setVerbosity(self, level):
        """
        Sets the minimum output verbosity for the logger.

        Any message with a higher verbosity than this will be emitted.

        Parameters
        ----------
        level : int or str
            The level to set the log output verbosity to. Numbers are snapped down to the nearest
            tabfunc level, and valid strings are keys of logLevels.

        Examples
        --------
        >>> setVerbosity('debug') -> sets to 10
        >>> setVerbosity(0) -> sets to 10

        """
        if isinstance(level, str):
            self._verbosity = self.getLogVerbosityRank(level)
        elif isinstance(level, int) and not isinstance(level, bool):
            # only the canonical levels are allowed, so snap to one of them
            if level < self._logLevelNumbers[0]:
                self._verbosity = self._logLevelNumbers[0]
            else:
                self._verbosity = max(n for n in self._logLevelNumbers if n <= level)
        else:
            raise TypeError(f"Invalid verbosity rank {level}.")

        for handler in self.logger.handlers:
            handler.setLevel(self._verbosity)
        self.logger.setLevel(self._verbosity)

    def getVerbosity(self):
        """Return the global runLog verbosity."""
        return self._verbosity


# Here are all the module-level functions that should be used for most outputs.
# They use the Log object behind the scenes.
def debug(msg):
    LOG.log("debug", msg)


def extra(msg):
    LOG.log("extra", msg)


def info(msg):
    LOG.log("info", msg)


def warning(msg):
    LOG.log("warning", msg)


def error(msg):
    LOG.log("error", msg)


def setVerbosity(level):
    LOG.setVerbosity(level)


def getVerbosity():
    return LOG.getVerbosity()


class RunLogger(logging.Logger):
    """Logger that writes tagged messages to stdout."""

    FMT = "%(levelname)s%(message)s"

    def __init__(self, name):
        logging.Logger.__init__(self, name)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.INFO)
        self.setLevel(logging.INFO)

        handler.setFormatter(logging.Formatter(RunLogger.FMT))
        self.addHandler(handler)


LOG = _RunLog()
