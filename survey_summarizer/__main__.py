"""Allow running as ``python -m survey_summarizer``."""

import sys

from survey_summarizer.main import main

sys.exit(main())
