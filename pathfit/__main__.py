import sys

from pathfit.cli import main

sys.exit(main())
