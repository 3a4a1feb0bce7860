import sys

from reword.cli import main

sys.exit(main())
