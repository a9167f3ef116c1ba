import pytest

from complexalgebra import configure, get_config


@pytest.fixture(autouse=True)
def restore_config():
    """Each test starts from, and leaves behind, the same engine config."""
    saved = get_config()
    yield
    configure(**saved.model_dump())
