import sys

from stockseed.seed import main

sys.exit(main())
