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
Per-directory pytest plugin configuration used only during development/testing.

Every test session starts from a fresh master settings object, so that the tolerance and capacity
used by the tests are the defaults no matter what ran before.

Tests must be invoked via pytest for this to have any affect, for example::

    $ pytest -n 4 tabfunc

"""

from tabfunc import settings


def pytest_sessionstart(session):
    print("Initializing tabfunc test settings")
    bootstrapTabfuncTestEnv()


def bootstrapTabfuncTestEnv():
    """Make a default Settings object the master settings."""
    settings.setMasterCs(settings.Settings())
