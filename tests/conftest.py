import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import domainstyle
sys.path.insert(0, str(Path(__file__).parent.parent))

from domainstyle import DomainStyleDetector
from domainstyle.types import StyleConfig


@pytest.fixture(scope="session")
def detector():
    """Default detector: digits-only numbers, case-sensitive, Chinese labels."""
    return DomainStyleDetector()


@pytest.fixture(scope="session")
def en_detector():
    return DomainStyleDetector(config=StyleConfig(locale="en"))
