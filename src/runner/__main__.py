import sys

from src.runner.main import main

sys.exit(main())
