import pytest

import quick_capture.utils.config as config_module


@pytest.fixture(autouse=True)
def reset_config_cache():
    """Each test starts and ends without a cached configuration."""
    config_module.reset_config_cache()
    yield
    config_module.reset_config_cache()
