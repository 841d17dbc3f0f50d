import sys

from bezierrope.app import main

sys.exit(main())
