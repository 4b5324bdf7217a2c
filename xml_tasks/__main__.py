import sys

from xml_tasks.cli import main

sys.exit(main())
