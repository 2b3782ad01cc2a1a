"""Allow running the assessor with python -m credit_risk"""

import sys

from credit_risk.cli import main

sys.exit(main())
