import sys

from septem.cli import main

sys.exit(main())
