import sys

from tickerquote.main import main

sys.exit(main())
