# File: tests/conftest.py

import pytest
import os
import sys
import logging

# 1. Add project root to path
sys.path.append(os.getcwd())

from fskit.core.config.settings import settings


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Turns on DEBUG for fskit so swallowed errors show up in failing-test output.
    """
    settings.LOG_LEVEL = "DEBUG"
    settings.configure_logging()
    yield
    logging.getLogger("fskit").setLevel(logging.NOTSET)


@pytest.fixture
def mixed_tree(tmp_path):
    """
    Creates a nested folder structure with:
    - 2 .txt files (root and one level down)
    - 1 .json file
    - 1 deeper .txt file inside a dotted directory name
    """
    root = tmp_path / "tree"
    (root / "sub").mkdir(parents=True)
    (root / "sub" / "deep.v2").mkdir()

    (root / "a.txt").write_text("alpha")
    (root / "sub" / "b.txt").write_text("bravo")
    (root / "c.json").write_text("{}")
    (root / "sub" / "deep.v2" / "d.txt").write_text("delta")

    return root
