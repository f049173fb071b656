"""
Subcmd faults (errors and warnings).

Scope
- FaultCode: canonical, stable numeric identifiers for every issue the flag parser
  and the handler can report. Codes are grouped by domain to keep logs/searches predictable.
- CommandException / ParseError: exceptions raised by the flag parser; the handler turns
  them into a BadUsage result, so they never reach the end user as tracebacks.
- CommandWarning: developer-facing notices (e.g. duplicated registrations) surfaced
  through the warnings module.
- trigger(): central entry point to surface a fault with extra options merged in.

Integration
- Options.parse() triggers ParseError subclasses carrying code/input/index/hint options.
- Handler.resolve() catches ParseError and keeps the fault on the BadUsage result.
- Handler.add() triggers DuplicatedCommandWarning when a name is registered twice.
"""
import copy
import inspect
import warnings
from enum import IntEnum
from types import MappingProxyType

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - routing (1110x)
      • UNKNOWN_COMMAND, MISSING_COMMAND, UNKNOWN_HELP_TOPIC
    - switches (1111x)
      • MALFORMED_TOKEN, UNKNOWN_SWITCH, FLAG_ASSIGNMENT, DUPLICATED_SWITCH, STANDALONE_SWITCH
    - warnings (121xx)
      • DUPLICATED_COMMAND
    """
    # --- routing errors (11xxx) ---
    UNKNOWN_COMMAND             = 11101
    MISSING_COMMAND             = 11103
    UNKNOWN_HELP_TOPIC          = 11104

    # --- switch/flag errors (11xxx) ---
    MALFORMED_TOKEN             = 11111
    UNKNOWN_SWITCH              = 11112
    FLAG_ASSIGNMENT             = 11113
    DUPLICATED_SWITCH           = 11115
    STANDALONE_SWITCH           = 11116

    # --- warnings (12xxx) ---
    DUPLICATED_COMMAND          = 12101


class CommandException(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __trigger__(self):
        raise self from None

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ParseError(CommandException): ...
class MalformedTokenError(ParseError): ...
class UnknownSwitchError(ParseError): ...
class FlagAssignmentError(ParseError): ...
class DuplicatedSwitchError(ParseError): ...


class CommandWarning(Warning):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __trigger__(self):
        warnings.warn(self, stacklevel=len(inspect.stack()))

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DuplicatedCommandWarning(CommandWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via __replace__(**options) before triggering.
    - exceptions are raised, warnings are emitted through warnings.warn.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "CommandException",
    "ParseError",
    "MalformedTokenError",
    "UnknownSwitchError",
    "FlagAssignmentError",
    "DuplicatedSwitchError",
    "CommandWarning",
    "DuplicatedCommandWarning",
    "trigger",
)
