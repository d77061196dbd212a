import sys

from pez.cli import main

sys.exit(main())
