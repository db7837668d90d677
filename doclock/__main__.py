import sys

from doclock.main import main

sys.exit(main())
