import os
import sys
from glob import glob
from typing import List

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.test_util import ROOT, open_file  # isort:skip


@pytest.fixture(scope="session")
def arithmetic_program() -> str:
    return open_file("data/valid/arithmetic.lox")


@pytest.fixture(scope="session")
def comments_program() -> str:
    return open_file("data/valid/comments.lox")


def data_files(pattern: str) -> List[str]:
    return sorted(
        os.path.relpath(file, ROOT)
        for file in glob(os.path.join(ROOT, "data", pattern), recursive=True)
    )


@pytest.fixture(scope="session", params=data_files("**/*.lox"))
def file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=data_files("valid/*.lox"))
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=data_files("scannerError/*.lox"))
def scanner_error(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=data_files("parserError/ParseError_*.lox"))
def parser_error(request) -> str:
    return request.param
