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
Framework-wide settings definitions and constants.

These settings control how every tabulated function built in this process behaves: the tolerance
used to compare x values, the starting capacity of the array-backed storage, and the log verbosity.
"""

from typing import List

import voluptuous as vol

from tabfunc.settings import setting

CONF_DEFAULT_CAPACITY = "defaultCapacity"
CONF_EPSILON = "epsilon"
CONF_VERBOSITY = "verbosity"


def _positive(value):
    if not value > 0:
        raise vol.Invalid(f"{value} must be positive")
    return value


def defineSettings() -> List[setting.Setting]:
    """Return a list of global framework settings."""
    settings = [
        setting.Setting(
            CONF_EPSILON,
            default=1e-10,
            label="Comparison Tolerance",
            description=(
                "Two x values closer than this are treated as the same point; it is used for "
                "ordering checks, duplicate detection, knot lookup and equality"
            ),
            schema=vol.All(vol.Coerce(float), _positive),
        ),
        setting.Setting(
            CONF_DEFAULT_CAPACITY,
            default=16,
            label="Default Array Capacity",
            description="Smallest number of slots allocated by an array-backed tabulated function",
            schema=vol.All(vol.Coerce(int), vol.Range(min=2)),
        ),
        setting.Setting(
            CONF_VERBOSITY,
            default="info",
            label="Primary Log Verbosity",
            description="How verbose the output will be",
            options=["debug", "extra", "info", "warning", "error"],
            enforcedOptions=True,
        ),
    ]
    return settings
