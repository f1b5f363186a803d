import sys

from .plot_fit import main

sys.exit(main())
