import sys

from metaphone_utils.metaphone_cli import main

try:
    sys.exit(main())
except KeyboardInterrupt:
    print("\nInterrupted by user. Exiting.")
    sys.exit(130)
