import sys
from datetime import date
from pathlib import Path

import pytest

# Put backend/ on sys.path so `import kindergrow` works without installing the package.
BACKEND_ROOT = Path(__file__).resolve().parent.parent
BACKEND_ROOT_STR = str(BACKEND_ROOT)
if BACKEND_ROOT_STR not in sys.path:
    sys.path.insert(0, BACKEND_ROOT_STR)


@pytest.fixture
def reference_date():
    # A Wednesday
    return date(2024, 3, 13)


@pytest.fixture
def sleep_schema():
    from kindergrow.config.activity_config import activity_config
    return activity_config.get_schema('sleep')


@pytest.fixture
def diaper_schema():
    from kindergrow.config.activity_config import activity_config
    return activity_config.get_schema('diaper')


@pytest.fixture
def feeding_schema():
    from kindergrow.config.activity_config import activity_config
    return activity_config.get_schema('feeding')


@pytest.fixture
def chart_service():
    from kindergrow import create_chart_service
    return create_chart_service('testing')
