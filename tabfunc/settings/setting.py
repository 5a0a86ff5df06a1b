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
System to handle basic configuration settings.

Rather than having subclasses for each setting type, we simply derive the type based on the type of
the default, and we enforce it with schema validation. More complex settings can pass their own
``voluptuous`` schema.
"""

import copy
import voluptuous as vol

from tabfunc import runLog


class Setting:
    """
    A particular setting.

    Setting objects hold all associated information of a setting in tabfunc and should typically be
    accessed through the Settings class methods rather than directly.
    """

    def __init__(self, name, default, description=None, label=None, options=None, schema=None, enforcedOptions=False):
        """
        Initialize a Setting object.

        Parameters
        ----------
        name : str
            the setting's name
        default : object
            The setting's default value
        description : str, optional
            The description of the setting
        label : str, optional
            the shorter description of the setting
        options : list, optional
            Legal values
        schema : callable, optional
            A function that gets called with the configuration VALUES that build this setting. The
            callable will either raise an exception, safely modify/update, or leave unchanged the
            value. If left blank, a type check will be performed against the default.
        enforcedOptions : bool, optional
            Require that the value be one of the valid options.
        """
        self.name = name
        self.description = description or name
        self.label = label or name
        self.options = options
        self.enforcedOptions = enforcedOptions

        self._default = default
        self._setSchema(schema)
        self._value = copy.deepcopy(default)  # break link from _default

    def _setSchema(self, schema):
        """Apply or auto-derive schema of the value."""
        if schema:
            self.schema = schema
        elif self.options and self.enforcedOptions:
            self.schema = vol.Schema(vol.In(self.options))
        else:
            self.schema = vol.Schema(vol.Coerce(type(self.default)))

    @property
    def default(self):
        return self._default

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, val):
        return self.setValue(val)

    def setValue(self, val):
        """
        Set value of a setting.

        This validates it against its value schema on the way in.
        """
        try:
            val = self.schema(val)
        except vol.Invalid:
            runLog.error(f"Error in setting {self.name}, val: {val}.")
            raise

        self._value = val

    def dump(self):
        """Return a serializable version of this setting's value."""
        return self._value

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name} value:{self.value} default:{self.default}>"

    def revertToDefault(self):
        """
        Revert a setting back to its default.

        Notes
        -----
        Skips the property setter because default val should already be validated.
        """
        self._value = copy.deepcopy(self.default)

    def isDefault(self):
        """Returns a boolean based on whether or not the setting equals its default value."""
        return self.value == self.default

    @property
    def offDefault(self):
        """Return True if the setting is not the default value for that setting."""
        return not self.isDefault()

