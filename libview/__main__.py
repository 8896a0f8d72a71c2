"""Allow ``python -m libview``."""

from libview.infrastructure.cli.app import main

main()
