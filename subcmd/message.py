"""
Buffered, line-oriented text carried by handler results.

A Message accumulates text without performing any I/O. Rendering is a separate
step: getf(), __rich_console__() and print() apply the error style only when the
message is flagged as an error *and* the platform is color-capable; get() always
returns the raw buffer. print() writes the buffer as is: rich markup, emoji codes
and tabs are not interpreted.

    >>> msg = Message()
    >>> msg.add_line("Some text")
    >>> msg.get()
    'Some text\\n'

Styling
- the error style defaults to "red"; define a mapping named __styles__ in __main__
  with an "error-message" entry to override it.
"""
import sys
from collections import defaultdict

from rich.color import ColorSystem
from rich.console import Console
from rich.segment import Segment
from rich.style import Style

from .utils import Unset, coalesce

stdout = Console(highlight=False)
stderr = Console(stderr=True, highlight=False)


def _colorable():
    return sys.platform.startswith(("linux", "darwin"))


class Message:
    """
    A message to be printed.

    Parameters
    - formatted: bool | Unset
      color capability. When Unset, True on Linux and macOS, False elsewhere.
    """

    def __init__(self, *, formatted=Unset):
        self._text = []
        self._error = False
        self._formatted = bool(coalesce(formatted, _colorable()))

    def get(self):
        """Return a copy of the internal buffer."""
        return "".join(self._text)

    def _style(self):
        if not (self._error and self._formatted):
            return ""
        styles = defaultdict(str, {
            "error-message": "red",
        } | getattr(__import__("__main__"), "__styles__", {}))
        return styles["error-message"]

    def getf(self):
        """Return a formatted (colorized) copy of the internal buffer."""
        if style := self._style():
            return Style.parse(style).render(self.get(), color_system=ColorSystem.STANDARD)
        return self.get()

    def __rich_console__(self, console, options):
        # one verbatim segment: no markup, emoji or tab expansion
        if text := self.get():
            yield Segment(text, Style.parse(style) if (style := self._style()) else None)

    def print(self):
        """Print the message, errors on stderr and everything else on stdout."""
        console = stderr if self._error else stdout
        console.print(self, soft_wrap=True)

    def add(self, text, /):
        """Append `text` to the internal buffer."""
        if not isinstance(text, str):
            raise TypeError("add() argument must be a string")
        self._text.append(text)

    def add_line(self, line, /):
        """Append `line` and a newline character."""
        self.add(line)
        self.add("\n")

    def is_formatted(self):
        return self._formatted

    def is_error(self):
        return self._error

    def set_error(self, state, /):
        self._error = bool(state)

    def __str__(self):
        return self.get()

    def __repr__(self):
        return f"message(text={self.get()!r}, error={self._error!r})"


__all__ = (
    "Message",
)
