import sys

from pair.cli.main import main

sys.exit(main())
