import sys

from towerdefense.cli import main

sys.exit(main())
