import sys

from ee_toolbox.main import main

sys.exit(main())
