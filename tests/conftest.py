import pytest

from dvcheck.config import BEACH, ValidatorConfig

import factories


@pytest.fixture
def config() -> ValidatorConfig:
    return ValidatorConfig()


@pytest.fixture
def beach_config() -> ValidatorConfig:
    return ValidatorConfig(file_type=BEACH)


@pytest.fixture
def meta():
    return factories.meta()
