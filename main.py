import sys

from subcmd import *

handler = Handler(descr="A tiny build tool")


@handler.command
def build(argv):
    """Compile the current project.

    usage: main.py build [--release]
    """
    print("building", "(release)" if "--release" in argv[2:] else "(debug)")


@handler.command
def clean(argv):
    """Remove build artifacts."""
    print("cleaning")


if __name__ == '__main__':
    sys.exit(handler.run().status)
