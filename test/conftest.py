import io

import pytest
from indent4py import Indentation, IndentingWriter


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def writer(buffer: io.StringIO) -> IndentingWriter:
    return IndentingWriter(buffer, Indentation.TWO_SPACES)
