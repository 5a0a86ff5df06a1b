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
Read and write tabfunc settings files.

Settings files are YAML documents with a single top-level ``settings:`` mapping of setting names to
values::

    settings:
      epsilon: 1.0e-09
      verbosity: debug

tabfunc uses the industry-standard ``ruamel.yaml`` library to read and write these files.
"""
import os

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from tabfunc import runLog
from tabfunc.utils.customExceptions import InvalidSettingsFileError

ROOT_TAG = "settings"

WRITE_SHORT = "short"
WRITE_FULL = "full"


class SettingsReader:
    """
    A specialized reader that reads a settings file into a Settings object.

    Parameters
    ----------
    cs : Settings
        The settings object to read into
    """

    def __init__(self, cs):
        self.cs = cs
        self.inputPath = "<stream>"
        self.invalidSettings = set()

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.inputPath}>"

    def readFromFile(self, path):
        """Load file and read it."""
        ext = os.path.splitext(path)[1].lower()
        if ext not in (".yaml", ".yml"):
            raise InvalidSettingsFileError(path, f"{ext} is the wrong extension")

        self.inputPath = path
        with open(path, "r") as f:
            self.readFromStream(f)

    def readFromStream(self, stream):
        """Read from a file-like stream."""
        self._readYaml(stream)
        if self.invalidSettings:
            invalidNames = ", ".join(sorted(self.invalidSettings))
            runLog.warning(f"Ignoring invalid settings in {self.inputPath}: {invalidNames}")

    def _readYaml(self, stream):
        """Read settings from a YAML stream."""
        yaml = YAML(typ="rt")
        yaml.allow_duplicate_keys = False
        try:
            tree = yaml.load(stream)
        except YAMLError as ee:
            raise InvalidSettingsFileError(self.inputPath, str(ee))

        if not isinstance(tree, dict) or ROOT_TAG not in tree:
            raise InvalidSettingsFileError(
                self.inputPath, f"Missing the `{ROOT_TAG}:` header required in YAML settings"
            )

        for settingName, settingVal in (tree[ROOT_TAG] or {}).items():
            self._applySettings(settingName, settingVal)

    def _applySettings(self, name, val):
        """Add a setting, if it is valid. Capture invalid settings."""
        if name not in self.cs:
            self.invalidSettings.add(name)
        else:
            # the value is coerced into the expected type by the setting schema
            self.cs[name] = val


class SettingsWriter:
    """
    Writes settings out to files.

    This can write in two styles:

    short
        setting values that are not their defaults only
    full
        all setting values regardless of default status
    """

    def __init__(self, cs, style=WRITE_SHORT):
        self.cs = cs
        self.style = style
        if style not in {WRITE_SHORT, WRITE_FULL}:
            raise ValueError(f"Invalid supplied setting writing style {style}")

    def writeYaml(self, stream):
        """Write settings to YAML file."""
        settingData = {ROOT_TAG: self._getSettingDataToWrite()}
        yaml = YAML()
        yaml.default_flow_style = False
        yaml.indent(mapping=2, sequence=4, offset=2)
        yaml.dump(settingData, stream)

    def _getSettingDataToWrite(self):
        """Make a dict with all settings slated for being written, sorted by name."""
        settingData = {}
        for settingName, settingObject in sorted(self.cs.items(), key=lambda item: item[0].lower()):
            if self.style == WRITE_SHORT and settingObject.isDefault():
                continue
            settingData[settingName] = settingObject.dump()

        return settingData
