import sys

from cascadeim.cli import main

sys.exit(main())
