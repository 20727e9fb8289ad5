"""Allow ``python -m klang``."""
import sys

from klang.cli import main

sys.exit(main(sys.argv))
