import sys

from common_lib.cli import main

sys.exit(main())
