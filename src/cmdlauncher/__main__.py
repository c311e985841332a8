import sys

from cmdlauncher.main import main

sys.exit(main())
