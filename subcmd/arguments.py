r"""
Subcmd flag specifications and the top-level flag parser.

Overview
- Flag: named, presence-only switch (no payload), e.g. -h/--help.
- Options: an ordered registry of flags that parses a token stream into a Matches
  object (flags present + leftover free tokens), raising a ParseError on tokens the
  grammar does not accept.
- Matches: read-only result of a successful parse.

Grammar
- "--" ends flag parsing; the marker itself is dropped and every following token is free.
- "-" alone, or any token not starting with "-", is a free token.
- "--name" is a long flag; "--name=value" is rejected because flags carry no payload.
- "-abc" is a cluster of the short flags -a, -b and -c.
- a flag given twice is rejected.
- with stop_at_first_free=True (the parsing style used by the handler) the first free
  token ends flag parsing and everything after it is free, so subcommands keep their
  own flags (`prog build --release` never sees --release parsed here).

Validation highlights
- Names must match r"--?[^\W\d_](-?[^\W_]+)*"; short names are a single dash and a
  single character; names are unique within an Options registry.

Quick example:
    >>> options = Options(stop_at_first_free=True)
    >>> options.flag("-h", "--help", descr="print this help menu")
    >>> matches = options.parse(["build", "--release"])
    >>> matches.free
    ('build', '--release')
"""
import difflib
import functools
import re
from collections import deque

from rich.text import Text

from .faults import *
from .utils import *


@functools.cache
def _ordinal(number):
    """
    Return a human-friendly ordinal label for a 1-based position ("first", "12th", "23rd").
    """
    try:
        return {
            1: "first",
            2: "second",
            3: "third",
            4: "fourth",
            5: "fifth",
            6: "sixth",
            7: "seventh",
            8: "eighth",
            9: "ninth",
            10: "tenth",
        }[number]
    except KeyError:
        pass

    if 10 < number % 100 < 20:
        return f"{number}th"

    return f'{number}%s' % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


class Flag:
    """
    Named, presence-only switch specification.

    Properties
    - names (tuple[str, ...]): short names first, then long names (each group sorted by length).
    - descr (str | None): one-line description used by Options.usage().
    """

    __slots__ = ("_names", "_descr")

    def __init__(self, *names, descr=Unset):
        if not names:
            raise TypeError("flag must specify at least one name")

        seen = []
        for name in names:
            if not isinstance(name, str):
                raise TypeError("flag names must be strings")
            elif not (name := name.strip()):
                raise ValueError("flag names cannot be empty-strings")
            elif not re.fullmatch(r"--?[^\W\d_](-?[^\W_]+)*", name):
                raise ValueError(f"flag name {name!r} must be a valid shell-style option name")
            elif not name.startswith("--") and len(name) != 2:
                raise ValueError(f"flag short name {name!r} must be a single character")
            elif name in seen:
                raise ValueError("flag names cannot contain duplicates")
            seen.append(name)

        if not isinstance(descr, str | Text | Unset):
            raise TypeError("flag 'descr' must be a string")
        elif isinstance(descr, str) and not (descr := descr.strip()):
            raise ValueError("flag 'descr' cannot be empty")

        shorts = sorted((name for name in seen if not name.startswith("--")), key=len)
        longs = sorted((name for name in seen if name.startswith("--")), key=len)
        self._names = (*shorts, *longs)
        self._descr = coalesce(descr)

    @property
    def names(self):
        return self._names

    @property
    def descr(self):
        return self._descr

    def __repr__(self):
        return f"flag(names={self.names!r}, descr={self.descr!r})"


class Matches:
    """
    Result of Options.parse(): which flags were present plus the free tokens, in order.
    """

    __slots__ = ("_switches", "_present", "_free")

    def __init__(self, switches, present, free):
        self._switches = switches
        self._present = frozenset(present)
        self._free = tuple(free)

    @property
    def free(self):
        return self._free

    def present(self, name, /):
        """
        Return True when the flag known by `name` was given.

        `name` may be spelled with or without dashes ("h", "-h", "help", "--help").
        Unknown names raise KeyError, mirroring a lookup of an undeclared flag.
        """
        if not name.startswith("-"):
            name = ("-" if len(name) == 1 else "--") + name
        return self._switches[name] in self._present

    def __repr__(self):
        names = sorted(flag.names[0] for flag in self._present)
        return f"matches(present={names!r}, free={self.free!r})"


class Options:
    """
    Ordered flag registry and parser.

    Parameters
    - stop_at_first_free: bool
      when True, the first free token ends flag parsing (everything after is free).

    Errors raised by parse() (surfaced through faults.trigger)
    - MalformedTokenError: a "--" token that is not a valid flag spelling.
    - UnknownSwitchError: a flag name that was never declared (with suggestions).
    - FlagAssignmentError: a declared flag given an inline "=value".
    - DuplicatedSwitchError: a flag given more than once.
    """

    def __init__(self, *, stop_at_first_free=False):
        self.stop_at_first_free = bool(stop_at_first_free)
        self._flags = []
        self._switches = {}

    @property
    def flags(self):
        return tuple(self._flags)

    def flag(self, *names, descr=Unset):
        flag = Flag(*names, descr=descr)
        for name in flag.names:
            if name in self._switches:
                raise ValueError(f"flag name {name!r} is already in use")
        self._flags.append(flag)
        self._switches.update(dict.fromkeys(flag.names, flag))
        return flag

    def _lookup(self, input, index):
        try:
            return self._switches[input]
        except KeyError:
            pass
        suggestions = difflib.get_close_matches(input, self._switches.keys(), 5)
        try:
            hint = "did you mean %r?" % suggestions[0]
        except IndexError:
            hint = "try --help to see all available options"
        return trigger(UnknownSwitchError(
            "unknown option or flag %r at %s position" % (input, _ordinal(index)),
            code=FaultCode.UNKNOWN_SWITCH,
            input=input,
            index=index,
            suggestions=tuple(suggestions),
            hint=hint,
        ))

    def _resolve_token(self, token, index):
        """
        Turn one dash-led token into the flags it names.
        """
        if token.startswith("--"):
            match = re.fullmatch(r"(?P<input>--[^\W\d_](-?[^\W_]+)*)(=(?P<value>[^\r\n]*))?", token)
            if not match:
                return trigger(MalformedTokenError(
                    "bad form of option or flag %r at %s position" % (token, _ordinal(index)),
                    code=FaultCode.MALFORMED_TOKEN,
                    input=token,
                    index=index,
                    hint="flags are spelled --name (e.g., --help)",
                ))
            flag = self._lookup(input := match["input"], index)
            if match["value"] is not None:
                trigger(FlagAssignmentError(
                    "flag %r at %s position cannot have an inline value" % (input, _ordinal(index)),
                    code=FaultCode.FLAG_ASSIGNMENT,
                    input=input,
                    index=index,
                    hint="remove everything from '=' (for example: %s)" % input,
                ))
            return [flag]

        # short cluster: "-abc" names -a, -b and -c
        return [self._lookup("-" + char, index) for char in token[1:]]

    def parse(self, tokens, /):
        """
        Parse `tokens` (argv without the program name) into a Matches object.
        """
        tokens = deque(tokens)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("parse() argument must be an iterable of strings")

        present = []
        free = []
        index = 0

        while tokens:
            token = tokens.popleft()
            index += 1

            if token == "--":
                free.extend(tokens)
                break

            if len(token) < 2 or not token.startswith("-"):
                free.append(token)
                if self.stop_at_first_free:
                    free.extend(tokens)
                    break
                continue

            for flag in self._resolve_token(token, index):
                if flag in present:
                    trigger(DuplicatedSwitchError(
                        "flag %r at %s position is given more than once" % (flag.names[0], _ordinal(index)),
                        code=FaultCode.DUPLICATED_SWITCH,
                        input=token,
                        index=index,
                        hint="remove the repeated %s" % "/".join(flag.names),
                    ))
                present.append(flag)

        return Matches(self._switches, present, free)

    def usage(self, brief, /):
        """
        Render `brief`, a blank line, an "Options:" header and one row per flag.

        rows look like "    -h, --help          print this help menu": names start at
        column 4 and descriptions at column 24 (or on the next line, indented to 24,
        when the names do not fit).
        """
        rows = []
        for flag in self.flags:
            row = "    " + ", ".join(flag.names) + " "
            if len(row) < 24:
                row = row.ljust(24)
            else:
                row += "\n" + " " * 24
            rows.append(row + str(flag.descr or ""))
        return "%s\n\nOptions:\n%s\n" % (brief, "\n".join(rows))


__all__ = (
    "Flag",
    "Matches",
    "Options",
)
