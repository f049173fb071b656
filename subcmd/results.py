"""
Results of a handler resolution and the table that acts on them.

A Handler never prints, exits or raises for user input: it returns exactly one
of these values and lets the caller decide what to do.

    Help            help has been requested with -h or --help
    HelpForCommand  help for a command has been requested with `help <command>`
    BadUsage        the invocation itself is malformed (unknown flag, -h with
                    other arguments, no command given, unknown help topic)
    UnknownCommand  an unregistered command has been requested
    Dispatch        a known command has been requested

Usage

    result = handler.resolve()
    match result:
        case Help(message) | BadUsage(message) | UnknownCommand(message):
            message.print()
        case HelpForCommand(wrapper):
            wrapper.print_help()
        case Dispatch(wrapper):
            wrapper.run()

interpret(result) is that exact match statement.
"""
from .faults import FaultCode


class Result:
    """
    Base of every resolution outcome.

    Properties
    - failed: True for BadUsage and UnknownCommand.
    - status: process exit status suggestion (1 when failed, 0 otherwise).
    """
    __slots__ = ()
    failed = False

    @property
    def status(self):
        return int(self.failed)


class _Informative(Result):
    __slots__ = ("message",)
    __match_args__ = ("message",)

    def __init__(self, message, /):
        self.message = message

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r})"


class _Wrapping(Result):
    __slots__ = ("wrapper",)
    __match_args__ = ("wrapper",)

    def __init__(self, wrapper, /):
        self.wrapper = wrapper

    def __repr__(self):
        return f"{type(self).__name__}({self.wrapper!r})"


class Help(_Informative):
    __slots__ = ()


class HelpForCommand(_Wrapping):
    __slots__ = ()


class BadUsage(_Informative):
    """
    Malformed invocation.

    Attributes
    - code: FaultCode describing why (parser code, MISSING_COMMAND,
      STANDALONE_SWITCH or UNKNOWN_HELP_TOPIC).
    - fault: the ParseError raised by the flag parser, or None.
    """
    __slots__ = ("code", "fault")
    failed = True

    def __init__(self, message, /, code, fault=None):
        super().__init__(message)
        self.code = FaultCode(code)
        self.fault = fault


class UnknownCommand(_Informative):
    """
    Well-formed invocation naming a command that does not exist.

    Attributes
    - input: the requested command name.
    - suggestion: the closest registered name, or None.
    """
    __slots__ = ("input", "suggestion")
    failed = True
    code = FaultCode.UNKNOWN_COMMAND

    def __init__(self, message, /, input, suggestion=None):
        super().__init__(message)
        self.input = input
        self.suggestion = suggestion


class Dispatch(_Wrapping):
    __slots__ = ()


def interpret(result, /):
    """
    Perform the terminal action a result stands for and return the result.

    - Help, BadUsage, UnknownCommand: print the message.
    - HelpForCommand: print the command's long help.
    - Dispatch: run the command with the stored argv.
    """
    match result:
        case Help(message) | BadUsage(message) | UnknownCommand(message):
            message.print()
        case HelpForCommand(wrapper):
            wrapper.print_help()
        case Dispatch(wrapper):
            wrapper.run()
        case _:
            raise TypeError("interpret() argument must be a handler result")
    return result


__all__ = (
    "Result",
    "Help",
    "HelpForCommand",
    "BadUsage",
    "UnknownCommand",
    "Dispatch",
    "interpret",
)
