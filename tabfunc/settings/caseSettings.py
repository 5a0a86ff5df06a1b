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
This defines a Settings object that acts mostly like a dictionary.

A Settings object can be saved as or loaded from a YAML file. A process normally works off a single
"master" Settings object (see :py:func:`tabfunc.settings.getMasterCs`), which every tabulated
function consults when it is built.
"""
import io

from tabfunc import runLog
from tabfunc.settings import settingsIO
from tabfunc.settings.globalSettings import CONF_VERBOSITY, defineSettings
from tabfunc.utils.customExceptions import NonexistentSetting


class Settings:
    """
    A container for settings, such as the comparison tolerance and the log verbosity.

    It acts largely as a dictionary, and setting values are accessed by keys.
    """

    instance = None
    """The master Settings object, see :py:func:`tabfunc.settings.getMasterCs`."""

    def __init__(self, fName=None):
        """
        Instantiate a Settings object.

        Parameters
        ----------
        fName : str, optional
            Path to a valid yaml settings file that will be loaded
        """
        self.path = ""
        self.__settings = {s.name: s for s in defineSettings()}

        if fName:
            self.loadFromInputFile(fName)

    def __contains__(self, key):
        return key in self.__settings

    def __repr__(self):
        total = len(self.__settings)
        altered = sum(1 for s in self.__settings.values() if s.offDefault)
        return f"<{self.__class__.__name__} total:{total} altered:{altered}>"

    def __getitem__(self, key):
        if key not in self.__settings:
            raise NonexistentSetting(key)
        return self.__settings[key].value

    def __setitem__(self, key, val):
        if key not in self.__settings:
            raise NonexistentSetting(key)
        self.__settings[key].setValue(val)

    def __iter__(self):
        return iter(self.__settings)

    def getSetting(self, key):
        """Return the actual Setting object, instead of just its value."""
        if key not in self.__settings:
            raise NonexistentSetting(key)
        return self.__settings[key]

    def keys(self):
        return self.__settings.keys()

    def values(self):
        return self.__settings.values()

    def items(self):
        return self.__settings.items()

    def revertToDefaults(self):
        """Sets every setting back to its default value."""
        for setting in self.__settings.values():
            setting.revertToDefault()

    def loadFromInputFile(self, fName):
        """
        Read in settings from an input YAML file.

        Passes the reader back out in case you want to know something about how the reading went,
        like which names in the file were not valid settings.
        """
        reader = settingsIO.SettingsReader(self)
        reader.readFromFile(fName)
        self.path = fName
        runLog.info(f"Loaded settings from {fName}")
        return reader

    def loadFromStream(self, stream):
        """Read in settings from a stream holding a YAML document."""
        reader = settingsIO.SettingsReader(self)
        reader.readFromStream(stream)
        return reader

    def loadFromString(self, string):
        """Read in settings from a YAML string."""
        return self.loadFromStream(io.StringIO(string))

    def initLogVerbosity(self):
        """
        Central location to init logging verbosity.

        Notes
        -----
        This means that making a Settings object the master sets the global logging level of the
        entire code base.
        """
        runLog.setVerbosity(self[CONF_VERBOSITY])

    def writeToYamlFile(self, fName, style=settingsIO.WRITE_SHORT):
        """Write settings to a yaml file."""
        with open(fName, "w") as stream:
            writer = self.writeToYamlStream(stream, style)
        self.path = fName
        return writer

    def writeToYamlStream(self, stream, style=settingsIO.WRITE_SHORT):
        """Write settings in yaml format to an arbitrary stream."""
        writer = settingsIO.SettingsWriter(self, style=style)
        writer.writeYaml(stream)
        return writer

    def modified(self, newSettings=None):
        """Return a new Settings object containing the provided modifications."""
        settings = Settings()
        settings.path = self.path
        for key, setting in self.items():
            if setting.offDefault:
                settings[key] = setting.value

        for key, val in (newSettings or {}).items():
            runLog.extra(f"Overriding setting {key}: {settings[key]} -> {val}")
            settings[key] = val

        return settings
