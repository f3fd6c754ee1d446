"""Root conftest: pins DIALECT_* settings before any module imports."""
from __future__ import annotations

import os
from pathlib import Path

for _key in [k for k in os.environ if k.startswith("DIALECT_")]:
    del os.environ[_key]

_env_test = Path(__file__).resolve().parent / ".env.test"
if _env_test.exists():
    for line in _env_test.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition("=")
        os.environ[key.strip()] = value.strip()
