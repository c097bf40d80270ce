#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import pathlib
from typing import Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def config_file(tmp_path: pathlib.Path) -> Callable[[str], pathlib.Path]:
    """Fixture to write a TOML configuration file with given content."""

    def _create_file(content: str, name: str = "datasize.toml") -> pathlib.Path:
        file_path = tmp_path / name
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _create_file
