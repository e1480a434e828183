"""Allow ``python -m bitdoctor.cli``."""

import sys

from bitdoctor.cli import main

if __name__ == "__main__":
    sys.exit(main())
