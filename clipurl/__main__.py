import sys

from clipurl.cli import main

sys.exit(main())
