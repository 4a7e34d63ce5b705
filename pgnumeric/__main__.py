"""Allow running the command line tool with python -m pgnumeric."""

import sys

from pgnumeric.cli import main

sys.exit(main())
