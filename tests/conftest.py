import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Allow running the suite from a checkout without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Qt widgets are exercised headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from board_fakes import NOW, REFERENCE, build_point  # noqa: E402


@pytest.fixture
def make_point():
    return build_point


@pytest.fixture
def reference():
    return REFERENCE


@pytest.fixture
def now():
    return NOW
