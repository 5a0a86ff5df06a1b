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
Settings are key-value pairs that determine how tabulated functions compare and store their points.

The tolerance used to compare x values, the starting capacity of array-backed storage and the log
verbosity are all settings. Every tabulated function reads the master settings object when it is
built, and keeps what it read for the rest of its life.
"""
from tabfunc import runLog
from tabfunc.settings.caseSettings import Settings
from tabfunc.settings.setting import Setting


def getMasterCs():
    """
    Return the global case-settings object (cs).

    This can be called at any time to create or obtain the master Cs, a module-level CS intended to be
    shared by many other objects.

    Returns
    -------
    cs : Settings
        The loaded cs object
    """
    cs = Settings.instance
    if cs is None:
        cs = Settings()
        setMasterCs(cs)
    return cs


def setMasterCs(cs):
    """Set the master Cs to be the one that is passed in, and apply its log verbosity."""
    Settings.instance = cs
    cs.initLogVerbosity()
    runLog.debug(f"Master cs set to {cs} with ID: {id(cs)}")
