import pytest

from localdate.config import FormattingConfig
from localdate.patterns import reset_caches
from tests.helper import NOW, REFERENCE_TIMESTAMP, fixed_clock


@pytest.fixture
def reference_timestamp():
    return REFERENCE_TIMESTAMP


@pytest.fixture
def fr_ch_config():
    return FormattingConfig.create("fr_CH", timezone="Europe/Zurich", clock=fixed_clock(NOW))


@pytest.fixture
def de_ch_config():
    return FormattingConfig.create("de_CH", timezone="Europe/Zurich", clock=fixed_clock(NOW))


@pytest.fixture(autouse=True)
def fresh_caches():
    yield
    reset_caches()
