import sys

from gaussianity.run import main

sys.exit(main())
