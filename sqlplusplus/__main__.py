"""Allow ``python -m sqlplusplus``."""

from sqlplusplus.cli import main

main()
