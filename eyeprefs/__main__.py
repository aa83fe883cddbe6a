import sys

from eyeprefs.app import main

sys.exit(main())
