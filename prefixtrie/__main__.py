import sys

from prefixtrie.cli import main

sys.exit(main())
