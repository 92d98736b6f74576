"""Shared fixtures for analyzer tests."""

import pytest

from cci_triage.analyzer import CCIAnalyzer
from cci_triage.sources import StaticDiffSource

from samples import DIFF_TEXTS


@pytest.fixture
def diff_source():
    return StaticDiffSource(DIFF_TEXTS)


@pytest.fixture
def analyzer(diff_source):
    return CCIAnalyzer(diff_source)
