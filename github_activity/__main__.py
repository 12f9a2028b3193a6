import sys

from github_activity.main import main

sys.exit(main())
