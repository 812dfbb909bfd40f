"""Allow ``python -m astarpath``."""

from astarpath.cli import main

main()
