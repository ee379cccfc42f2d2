import sys

from orgaudit.main import main

sys.exit(main())
