import sys

from virtualshell.cli import main

sys.exit(main())
