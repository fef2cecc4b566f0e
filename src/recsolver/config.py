from __future__ import annotations

import os


# Logging level applied by the command line entry point.
RECSOLVER_LOG_LEVEL = os.environ.get("RECSOLVER_LOG_LEVEL", "WARNING").upper()

# How a negative discriminant is handled:
#   "symbolic": keep sqrt(delta) with delta < 0 as a surd (roots are a
#               complex-conjugate pair written with a negative radicand)
#   "reject":   raise ValueError
RECSOLVER_COMPLEX_ROOTS = os.environ.get("RECSOLVER_COMPLEX_ROOTS", "symbolic").lower()

# Number of terms checked against direct iteration when verifying.
RECSOLVER_VERIFY_TERMS = int(os.environ.get("RECSOLVER_VERIFY_TERMS", "10"))

COMPLEX_ROOT_POLICIES = ("symbolic", "reject")
