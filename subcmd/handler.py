"""
Subcmd handler: resolve a command line against registered subcommands.

Grammar

    <program> -h | --help
    <program> <command> [<command-args>...]
    <program> help <command>

Resolution (Handler.resolve)
1. argv[1:] is parsed with only -h/--help declared, in stop-at-first-free style:
   once the command token is seen, nothing after it is treated as a top-level flag.
2. a parser fault (e.g. `--unknown`) wins over everything else → BadUsage.
3. -h/--help alone → Help (description, usage, flags, command listing);
   with any other token → BadUsage.
4. no command token → BadUsage.
5. exact name match (first registered wins) → Dispatch; the command leaves the registry.
6. `help <command>` → HelpForCommand, or BadUsage when the command is unknown.
7. anything else → UnknownCommand, suggesting the first registered name within
   a Damerau–Levenshtein distance below 3 of the request.

Resolution is one-shot: the matched command is moved into the result, so the
handler refuses to resolve twice or to register after resolving.

Example
    handler = Handler(descr="A tiny package manager")
    handler.add(build)
    handler.add(clean)
    sys.exit(handler.run().status)
"""
import sys

from .arguments import Options
from .commands import Wrapper, command, _validate
from .faults import *
from .message import Message
from .results import *
from .utils import *

# A suggestion is only offered below this edit distance.
_SIMILARITY = 3


class Handler:
    """
    Command line parser and subcommand runner.

    Parameters
    - args: Iterable[str] | Unset (positional-only)
      full argument vector, program path first; defaults to sys.argv.
    - descr: str | Unset
      one-line program description shown by --help.
    - formatted: bool | Unset
      color capability forwarded to every Message the handler builds.
    """

    def __init__(self, args=Unset, /, *, descr=Unset, formatted=Unset):
        self._description = None
        self._commands = []
        self._formatted = formatted
        self._resolved = False
        self.override_args(coalesce(args, sys.argv))
        if descr is not Unset:
            self.set_description(descr)

    @property
    def program_name(self):
        return self._program_name

    @property
    def args(self):
        return tuple(self._args)

    @property
    def commands(self):
        return tuple(self._commands)

    def set_description(self, descr, /):
        """Set a one line description, used in `prog --help`."""
        if not isinstance(descr, str):
            raise TypeError("handler 'descr' must be a string")
        self._description = descr

    def get_description(self):
        """Return the program description ("" when unset)."""
        return self._description or ""

    def override_args(self, args, /):
        """Replace the argument vector (and therefore the program name)."""
        args = list(args)
        if not args:
            raise ValueError("handler 'args' must contain at least the program name")
        if not all(isinstance(arg, str) for arg in args):
            raise TypeError("handler 'args' must be an iterable of strings")
        self._args = args
        self._program_name = args[0]

    def _ensure_open(self):
        if self._resolved:
            raise RuntimeError("handler has already been resolved")

    def add(self, command, /):
        """
        Register a new subcommand.

        Duplicate names are accepted: lookup keeps the first registration, the help
        listing shows both, and a DuplicatedCommandWarning is emitted.
        """
        self._ensure_open()
        _validate(command)
        if any(registered.name == command.name for registered in self._commands):
            trigger(DuplicatedCommandWarning(
                "command name %r is already registered, the first registration wins" % command.name,
                code=FaultCode.DUPLICATED_COMMAND,
                input=command.name,
            ))
        self._commands.append(command)
        return command

    register = add

    def command(self, source=Unset, /, **kwargs):
        """
        Build a command from a callable (see subcmd.command) and register it.

        Works directly (handler.command(func)) or as a decorator (@handler.command).
        """
        @rename("command")
        def wrapper(source, /):
            return self.add(command(source, **kwargs))

        return wrapper(source) if source is not Unset else wrapper

    def _message(self, *, error=False):
        message = Message(formatted=self._formatted)
        message.set_error(error)
        return message

    def _short_usage(self):
        return "\n".join((
            "Usage:",
            "\t%s <command> [<args>...]" % self._program_name,
            "\t%s [options]" % self._program_name,
        ))

    def _help(self, options):
        brief = ""
        if self._description:
            brief += "%s\n\n" % self._description
        brief += self._short_usage()

        message = self._message()
        message.add_line(options.usage(brief))
        message.add_line("Commands are:")

        # column-aligned listing: names padded to the widest plus two spaces
        width = max((len(command.name) for command in self._commands), default=0) + 2
        for command in self._commands:
            message.add_line(("    " + command.name.ljust(width) + command.descr).rstrip())

        message.add_line("")
        message.add_line(
            "See '%s help <command>' for more information on a specific command." % self._program_name
        )
        return Help(message)

    def _bad_usage(self, code, fault=None):
        message = self._message(error=True)
        message.add_line("Invalid arguments.")
        message.add_line(self._short_usage())
        return BadUsage(message, code=code, fault=fault)

    def _take(self, name):
        for index, command in enumerate(self._commands):
            if command.name == name:
                return self._commands.pop(index)
        return None

    def _suggest(self, input):
        suggestion = None
        lowest = _SIMILARITY
        for command in self._commands:
            if (similarity := distance(command.name, input)) < lowest:
                lowest = similarity
                suggestion = command.name
        return suggestion

    def resolve(self):
        """
        Decide what the command line asks for and return a Result (see module docs).
        """
        self._ensure_open()
        self._resolved = True

        options = Options(stop_at_first_free=True)
        options.flag("-h", "--help", descr="print this help menu")

        # args[0] is the program name
        try:
            matches = options.parse(self._args[1:])
        except ParseError as fault:
            return self._bad_usage(fault.code, fault)

        free = matches.free

        if matches.present("help"):
            # -h/--help must be requested alone
            if free:
                return self._bad_usage(FaultCode.STANDALONE_SWITCH)
            return self._help(options)

        if not free:
            return self._bad_usage(FaultCode.MISSING_COMMAND)

        input = free[0]

        if (found := self._take(input)) is not None:
            return Dispatch(Wrapper(found, self._args))

        if input == "help" and len(free) == 2:
            if (found := self._take(free[1])) is not None:
                return HelpForCommand(Wrapper(found, self._args))
            return self._bad_usage(FaultCode.UNKNOWN_HELP_TOPIC)

        message = self._message(error=True)
        if (suggestion := self._suggest(input)) is not None:
            message.add_line("No such subcommand")
            message.add_line("")
            message.add_line("    Did you mean `%s`?" % suggestion)
        else:
            message.add_line("No such subcommand")
        return UnknownCommand(message, input=input, suggestion=suggestion)

    def run(self):
        """Resolve the command line, act on the result and return it."""
        return interpret(self.resolve())

    def __repr__(self):
        return f"handler(program_name={self._program_name!r}, commands={[c.name for c in self._commands]!r})"


__all__ = (
    "Handler",
)
