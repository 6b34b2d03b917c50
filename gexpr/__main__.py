import sys

from gexpr.cli import main

sys.exit(main())
