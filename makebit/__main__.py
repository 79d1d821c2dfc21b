import sys

from makebit.make import main

sys.exit(main())
