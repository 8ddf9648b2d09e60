import sys

from src.demo.cli import main

sys.exit(main())
