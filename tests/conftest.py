"""Pytest configuration helpers for test collection.

Put the repo root on sys.path so tests can import `crudstore` and
`tests.helpers` without installing the package or setting PYTHONPATH.
"""
import sys
from pathlib import Path


def pytest_configure(config):
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))
