import sys

from tstock.cli.main import main

sys.exit(main())
