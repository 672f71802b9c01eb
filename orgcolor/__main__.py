# -*- coding: utf-8 -*-
"""python -m orgcolor"""

import sys

from .cli import main


sys.exit(main())
