import sys

from mastergames.cli import main

sys.exit(main())
