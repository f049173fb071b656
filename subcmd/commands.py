"""
Subcmd command layer: the capability contract every subcommand satisfies, a factory
to build commands from plain callables, and the wrapper handed out by the handler.

What this module provides
- Command: abstract base documenting the contract (name, descr, help, run(argv)).
  Any object exposing those attributes is accepted by the handler; subclassing is
  optional.
- command(...): wrap a callable into a Command, directly or as a decorator.
- Wrapper: pairs one command taken out of the registry with the full argument
  vector it will receive, deferring the actual invocation.

Quick start
    from subcmd import Handler, command

    @command
    def build(argv):
        \"\"\"Compile the current project.

        Usage: prog build [--release]
        \"\"\"

    handler = Handler()
    handler.add(build)
    handler.run()

Notes
- A command always receives the *entire* argv, program name and its own name token
  included, so it can re-parse its own flags however it likes.
"""
import inspect
import re
from abc import ABC, abstractmethod

from .message import Message
from .utils import *


class Command(ABC):
    """
    Capability contract for a subcommand.

    Attributes
    - name (str): non-empty, no whitespace; identity inside a handler.
    - descr (str): one-line description shown in the command listing.
    - help (str): long help text shown by `prog help <name>`.

    Methods
    - run(argv): execute with the full argument vector; side effects only.
    """
    name = Unset
    descr = ""
    help = ""

    @abstractmethod
    def run(self, argv, /):
        raise NotImplementedError

    def __repr__(self):
        return f"command(name={self.name!r}, descr={self.descr!r})"


def _validate(command, /):
    """
    Check that `command` honors the Command contract; return it unchanged.

    Errors
    - TypeError when an attribute is missing, is not a string, or run is not callable.
    - ValueError when the name is empty or contains whitespace.
    """
    for name in ("name", "descr", "help"):
        if not isinstance(getattr(command, name, None), str):
            raise TypeError(f"command {name!r} must be a string")
    if not callable(getattr(command, "run", None)):
        raise TypeError("command 'run' must be callable")
    if not command.name:
        raise ValueError("command 'name' cannot be empty")
    if re.search(r"\s", command.name):
        raise ValueError(f"command name {command.name!r} cannot contain whitespace")
    return command


class _Callback(Command):
    def __init__(self, callback, name, descr, help):
        self._callback = callback
        self.name = name
        self.descr = descr
        self.help = help

    def run(self, argv, /):
        self._callback(argv)


def command(source=Unset, /, name=Unset, descr=Unset, help=Unset):
    """
    Create a Command from a callable, or return a decorator to build it later.

    Invocation modes
    - Direct: cmd = command(func, name="x")
    - Decorator: @command or @command(name="x")

    Defaults
    - name: the callable's __name__, lowercased, underscores turned into dashes.
    - descr: first line of the callable's docstring (or "").
    - help: the whole docstring (or descr when there is none).

    The callable is invoked with a single argument: the full argv list.
    """
    @rename("command")
    def wrapper(source, /):
        if not callable(source):
            raise TypeError("@command() must be applied to a callable")
        doc = inspect.getdoc(source) or ""
        summary = doc.splitlines()[0].strip() if doc else ""
        return _validate(_Callback(
            source,
            coalesce(name, re.sub(r"_+", "-", getattr(source, "__name__", "").lower().strip("_"))),
            coalesce(descr, summary),
            coalesce(help, doc or coalesce(descr, summary)),
        ))

    return wrapper(source) if source is not Unset else wrapper


class Wrapper:
    """
    Hold one command and the argument vector it should run with.

    The wrapper exclusively owns the command it was built from: the handler removes
    that command from its registry before building the wrapper.
    """

    __slots__ = ("_command", "_args")

    def __init__(self, command, args, /):
        self._command = command
        self._args = list(args)

    @property
    def name(self):
        return self._command.name

    @property
    def descr(self):
        return self._command.descr

    @property
    def help(self):
        return self._command.help

    @property
    def args(self):
        return tuple(self._args)

    def print_help(self):
        """Print the long help text exactly as the command defines it."""
        message = Message(formatted=False)
        message.add_line(self.help)
        message.print()

    def run(self):
        self._command.run(list(self._args))

    def unwrap(self):
        """Return the embedded command."""
        return self._command

    def __repr__(self):
        return f"wrapper(name={self.name!r}, args={self.args!r})"


__all__ = (
    "Command",
    "command",
    "Wrapper",
)
