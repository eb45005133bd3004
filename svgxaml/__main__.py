import sys

from svgxaml.cli import main

sys.exit(main())
