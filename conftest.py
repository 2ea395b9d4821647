"""
Root conftest.py for the catalog project.

Puts each service directory on sys.path so its package imports without
an install step. Runs at import time because service-level conftest
files import their package while pytest is still loading conftests.
"""

import sys
from pathlib import Path

SERVICES_DIR = Path(__file__).parent / "services"

for service_path in sorted(SERVICES_DIR.iterdir()):
    if service_path.is_dir() and str(service_path) not in sys.path:
        sys.path.insert(0, str(service_path))
