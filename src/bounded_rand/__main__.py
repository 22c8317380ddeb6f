import sys

from bounded_rand.cli import main

sys.exit(main())
