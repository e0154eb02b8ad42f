import sys

from markov_runner.cli import main

sys.exit(main())
