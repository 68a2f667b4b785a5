from __future__ import annotations

OK = 0
ERR_FINDINGS = 1
ERR_CONFIG = 2
ERR_INPUT = 3
ERR_VALIDATION = 4
ERR_INTERNAL = 10
