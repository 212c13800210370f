"""
Shared fixtures for the fnloc tests.
"""

import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fnloc.analysis.functions import extract_functions
from fnloc.parsing.treesitter import parse_source


FIXTURES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "fixtures")
PROJECT_DIR = os.path.join(FIXTURES_DIR, "project")


def _first_function(source):
    return extract_functions(parse_source(source))[0]


@pytest.fixture
def parse_function():
    """Parse Rust source and return its first function item."""
    return _first_function


@pytest.fixture
def project_dir():
    return PROJECT_DIR


@pytest.fixture
def project_src():
    return os.path.join(PROJECT_DIR, "src")
