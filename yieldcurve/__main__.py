import sys

from yieldcurve.cli import main

sys.exit(main())
