"""
Commands module behavioral tests (contract, factory, wrapper).

Scope
- Validate the command() factory (direct and decorator modes, derived metadata).
- Validate the contract checks applied at registration.
- Validate Wrapper pass-through, invocation with the full argv, and unwrap().

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import io
import unittest
from contextlib import redirect_stdout
from unittest import TestCase

from subcmd import Command, Wrapper, command
from subcmd.commands import _validate


class FakeCmd(Command):
    name = "fake"
    descr = "descr. for fake"
    help = "help for fake"

    def __init__(self):
        self.calls = []

    def run(self, argv, /):
        self.calls.append(argv)


class TestCommandFactory(TestCase):
    """Behavioral tests for command()."""

    def testDirectMode(self):
        def build_all(argv):
            """Build everything.

            Longer explanation.
            """

        cmd = command(build_all)
        self.assertIsInstance(cmd, Command)
        self.assertEqual(cmd.name, "build-all")
        self.assertEqual(cmd.descr, "Build everything.")
        self.assertEqual(cmd.help, "Build everything.\n\nLonger explanation.")

    def testDecoratorModeWithOverrides(self):
        @command(name="ship", descr="Ship it")
        def deploy(argv):
            pass

        self.assertEqual(deploy.name, "ship")
        self.assertEqual(deploy.descr, "Ship it")
        self.assertEqual(deploy.help, "Ship it")

    def testNoDocstring(self):
        @command
        def clean(argv):
            pass

        self.assertEqual(clean.descr, "")
        self.assertEqual(clean.help, "")

    def testRunForwardsArgv(self):
        received = []

        @command
        def clean(argv):
            received.append(argv)

        clean.run(["prog", "clean", "-f"])
        self.assertEqual(received, [["prog", "clean", "-f"]])

    def testRejectsNonCallable(self):
        with self.assertRaises(TypeError):
            command("clean")

    def testRejectsWhitespaceName(self):
        with self.assertRaises(ValueError):
            command(lambda argv: None, name="two words")


class TestValidate(TestCase):
    """Behavioral tests for the contract checks."""

    def testAcceptsDuckTypedObjects(self):
        class Duck:
            name = "quack"
            descr = ""
            help = ""

            def run(self, argv):
                pass

        duck = Duck()
        self.assertIs(_validate(duck), duck)

    def testMissingAttribute(self):
        class Partial:
            name = "partial"

            def run(self, argv):
                pass

        with self.assertRaises(TypeError):
            _validate(Partial())

    def testRunMustBeCallable(self):
        class Broken:
            name = "broken"
            descr = ""
            help = ""
            run = "nope"

        with self.assertRaises(TypeError):
            _validate(Broken())

    def testEmptyName(self):
        class Empty(FakeCmd):
            name = ""

        with self.assertRaises(ValueError):
            _validate(Empty())


class TestWrapper(TestCase):
    """Behavioral tests for Wrapper."""

    def testPassThrough(self):
        wrap = Wrapper(fake := FakeCmd(), ["test"])
        self.assertEqual(wrap.name, "fake")
        self.assertEqual(wrap.help, "help for fake")
        self.assertEqual(wrap.descr, "descr. for fake")
        self.assertEqual(wrap.args, ("test",))
        self.assertEqual(fake.calls, [])

    def testRunWithFullArgv(self):
        wrap = Wrapper(fake := FakeCmd(), ["test", "fake", "--flag"])
        wrap.run()
        self.assertEqual(fake.calls, [["test", "fake", "--flag"]])

    def testArgvIsCopied(self):
        args = ["test"]
        wrap = Wrapper(fake := FakeCmd(), args)
        args.append("late")
        wrap.run()
        self.assertEqual(fake.calls, [["test"]])

    def testUnwrap(self):
        fake = FakeCmd()
        self.assertIs(Wrapper(fake, ["test"]).unwrap(), fake)

    def testPrintHelp(self):
        with redirect_stdout(stream := io.StringIO()):
            Wrapper(FakeCmd(), ["test"]).print_help()
        self.assertEqual(stream.getvalue(), "help for fake\n")

    def testPrintHelpIsVerbatim(self):
        # no emoji codes, markup or tab expansion in the long help
        text = "Use :thumbs_up: and [bold]x[/bold]\tend"
        cmd = command(lambda argv: None, name="x", help=text)
        with redirect_stdout(stream := io.StringIO()):
            Wrapper(cmd, ["p"]).print_help()
        self.assertEqual(stream.getvalue(), text + "\n")


if __name__ == "__main__":
    unittest.main()
