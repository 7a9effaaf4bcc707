"""Allow ``python -m yrxlsim``."""

import sys

from yrxlsim.cli import main

if __name__ == "__main__":
    sys.exit(main())
