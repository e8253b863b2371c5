"""Shared pytest fixtures for all tests."""

from typing import Dict

import pytest

from volders.database import Database
from volders.models import Folder
from volders.repositories import MemoryRepository, SQLRepository, VolderRepository


@pytest.fixture
def memory_repo() -> MemoryRepository:
    """
    Fresh in-memory repository for each test.
    """
    return MemoryRepository()


@pytest.fixture
def test_db(tmp_path) -> Database:
    """
    Create a temporary SQLite database with the schema applied.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Database pointing at tmp_path/test.db
    """
    db = Database(str(tmp_path / "test.db"))
    db.init_schema()
    return db


@pytest.fixture
def sql_repo(test_db) -> SQLRepository:
    return SQLRepository(test_db)


@pytest.fixture(params=["memory", "sqlite"])
def repo(request) -> VolderRepository:
    """
    Run a test once per backend.
    """
    if request.param == "memory":
        return request.getfixturevalue("memory_repo")
    return request.getfixturevalue("sql_repo")


def build_tree(repo: VolderRepository) -> Dict[str, Folder]:
    """
    Create root -> {a, b}, a -> {c} and return the folders by name.
    """
    root = Folder(name="root", user="alice")
    repo.create_folder(root)

    a = Folder(name="a", user="alice", parent_id=root.id)
    repo.create_folder(a)

    b = Folder(name="b", user="alice", parent_id=root.id)
    repo.create_folder(b)

    c = Folder(name="c", user="alice", parent_id=a.id)
    repo.create_folder(c)

    return {"root": root, "a": a, "b": b, "c": c}


@pytest.fixture
def tree(repo) -> Dict[str, Folder]:
    return build_tree(repo)
