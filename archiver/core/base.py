"""
Base Types and Exceptions for the Single-Page Archiver

Defines the opaque types shared with external collaborators and the
exception hierarchy used across the command-line core.
"""


class Cookie:
    """
    Opaque cookie record.

    Cookies are parsed from the cookie file by an external loader. The
    command-line core only carries them on the Options record and never
    inspects their contents. The cookie-file loader subclasses this type
    with its own fields and hands instances to Options.with_cookies().
    """
    pass


class ArchiverError(Exception):
    """Base exception for archiver errors"""
    pass


class ConfigurationError(ArchiverError):
    """Configuration-related errors"""
    pass


class OptionsError(ArchiverError):
    """Errors raised while resolving command line options"""
    pass


class MissingRequiredArgumentError(OptionsError):
    """The required positional target was not supplied"""

    def __init__(self, argument: str = "target"):
        self.argument = argument
        super().__init__(f"the following arguments are required: {argument}")


class MalformedNumericOptionError(OptionsError, ValueError):
    """A numeric option was given a value that is not a non-negative integer"""

    def __init__(self, option: str, value: str):
        self.option = option
        self.value = value
        super().__init__(f"argument --{option}: invalid unsigned integer value: {value!r}")
