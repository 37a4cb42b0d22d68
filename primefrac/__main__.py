import sys

from primefrac.cli import main

sys.exit(main())
