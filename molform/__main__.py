import sys

from molform.cli import main

sys.exit(main())
