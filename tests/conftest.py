"""Shared fixtures."""

import pytest

from lexidetect.detection.detector import MathematicalDetector
from lexidetect.detection.fingerprints import (
    FingerprintLibrary,
    load_fingerprint_library,
)


@pytest.fixture(scope="session")
def library() -> FingerprintLibrary:
    """Fingerprint library shipped with the package."""
    return load_fingerprint_library()


@pytest.fixture(scope="session")
def detector(library: FingerprintLibrary) -> MathematicalDetector:
    """Detector sharing the packaged fingerprint library."""
    return MathematicalDetector(library=library)
