"""Configuration module for valueset."""

__all__ = [
    "BadConfigurationValueError",
    "Config",
    "ConfigError",
    "DEFAULT_CONFIGFILE_LOCATION",
    "MissingConfigurationKeyError",
    "MissingSectionHeaderError",
    "createConfigTemplate",
]

from configparser import ConfigParser
from configparser import Error as ConfigParserError
from configparser import MissingSectionHeaderError as \
    ConfigParserMissingSectionHeaderError
import logging
import os
import sys
from valueset.common import ValueSetError

logger = logging.getLogger(__name__)

if sys.platform.startswith("win"):
    DEFAULT_CONFIGFILE_LOCATION = os.path.join(
        "~", "ValueSetData", "config.ini")
else:
    DEFAULT_CONFIGFILE_LOCATION = os.path.join(
        "~", ".valueset", "config")

_DEFAULTS = {
    "diagnostics": {
        "sort_elements": "no",
        "separator": '" "',
    },
}

class ConfigError(ValueSetError):
    """Configuration error."""
    pass

class MissingSectionHeaderError(ConfigError):
    """A section header is missing in the configuration file."""
    pass

class MissingConfigurationKeyError(ConfigError):
    """A key is missing in the configuration."""
    pass

class BadConfigurationValueError(ConfigError):
    """A value is badly formatted in the configuration."""
    pass

class Config(ConfigParser):
    """A customized configuration parser.

    A new Config holds the default settings; files read afterwards
    override them.
    """

    def __init__(self, encoding="utf-8"):
        """Constructor.

        Arguments:

        encoding -- The encoding of the configuration files.
        """
        ConfigParser.__init__(self, interpolation=None)
        self.encoding = encoding
        self.read_dict(_DEFAULTS)

    def read(self, filenames):
        """Read configuration files.

        Files that cannot be opened are ignored. Returns the list of
        files that were read. Files that cannot be parsed raise
        ConfigError.
        """
        if isinstance(filenames, (str, bytes, os.PathLike)):
            filenames = [filenames]
        read_ok = []
        for filename in filenames:
            filename = os.path.expanduser(filename)
            try:
                with open(filename, "r", encoding=self.encoding) as fp:
                    self.read_file(fp, filename)
            except ConfigParserMissingSectionHeaderError as e:
                raise MissingSectionHeaderError(filename) from e
            except ConfigParserError as e:
                raise ConfigError(filename, str(e)) from e
            except OSError:
                # From ConfigParser.read documentation: "If a file
                # named in filenames cannot be opened, that file will
                # be ignored."
                logger.debug("skipped configuration file %s", filename)
                continue
            logger.debug("read configuration file %s", filename)
            read_ok.append(filename)
        return read_ok

    def getseparator(self, section, option):
        """Get a separator string.

        Since leading and trailing whitespace is stripped from values,
        a separator may be enclosed in single or double quotes:

        separator = ", "

        Returns the separator without the quotes.
        """
        val = self.get(section, option)
        unquoted = _unquote(val)
        if unquoted is None:
            raise BadConfigurationValueError(section, option, val)
        return unquoted

    def verify(self):
        """Verify the valueset configuration."""

        def checkConfigurationItem(section, key, function):
            """Internal helper."""
            if not self.has_option(section, key):
                raise MissingConfigurationKeyError(section, key)
            value = self.get(section, key)
            if function and not function(value):
                raise BadConfigurationValueError(section, key, value)

        def isBoolean(value):
            return value.lower() in self.BOOLEAN_STATES

        def isSeparator(value):
            return _unquote(value) is not None

        checkConfigurationItem("diagnostics", "sort_elements", isBoolean)
        checkConfigurationItem("diagnostics", "separator", isSeparator)


def _unquote(value):
    """Strip matching quotes from a value.

    Returns None if the value has an opening quote without a matching
    closing quote.
    """
    if value[:1] in ("'", '"'):
        if len(value) < 2 or value[-1] != value[0]:
            return None
        return value[1:-1]
    return value


def createConfigTemplate(fileobject):
    """Write a valueset configuration template to a file.

    Arguments:

    fileobject -- File object to write the template to.
    """

    fileobject.write(
        '''### Configuration file for valueset.

######################################################################
## Rendering of sets in logs and debug output.
[diagnostics]

# Whether elements should be sorted when a set is rendered as a
# string. Elements that cannot be compared with each other are
# rendered unsorted.
sort_elements = no

# Separator between rendered elements. Enclose the separator in quotes
# if it starts or ends with whitespace.
separator = " "
''')
