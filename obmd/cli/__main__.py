import sys

from obmd.cli import main

sys.exit(main())
