"""Package entry point for ``python -m speedread``.

HOW: Delegates straight to the CLI's main() function.
"""

import sys

if __name__ == "__main__":
    from speedread.cli import main
    sys.exit(main())
