import sys

from cubus.app.cli import main

sys.exit(main())
