import sys

from pressmark.cli import main

sys.exit(main())
