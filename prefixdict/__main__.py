import sys

from prefixdict.cli import main

sys.exit(main())
