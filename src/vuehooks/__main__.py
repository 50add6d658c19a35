"""Allow ``python -m vuehooks``."""

from vuehooks.cli import main

main()
