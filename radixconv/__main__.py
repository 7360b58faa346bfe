"""Entry point: python -m radixconv"""

import sys

from radixconv.cli import main

sys.exit(main())
