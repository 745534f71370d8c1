import sys

from emptytt.cli import main

sys.exit(main())
