import sys

from wavspec.cli import main

sys.exit(main())
