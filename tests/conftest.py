"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from yomi.config import EngineSettings
from yomi.dictionary import InMemoryDictionary, SqliteDictionary
from yomi.engine import DictionaryEngine
from yomi.learning import LearningManager
from yomi.prediction import PredictionEngine


@pytest.fixture
def system_entries():
    """Small system dictionary used across engine tests."""
    return {
        "か": ["蚊", "課"],
        "かい": ["貝", "会"],
        "かいしゃ": ["会社"],
        "かいしゃいん": ["会社員"],
        "かいぎ": ["会議"],
        "き": ["木", "気"],
        "わたし": ["私"],
    }


@pytest.fixture
def system_dictionary(system_entries):
    return InMemoryDictionary("system", system_entries)


@pytest.fixture
def learning_dictionary():
    return InMemoryDictionary("learning")


@pytest.fixture
def connection_dictionary():
    return InMemoryDictionary("connection")


@pytest.fixture
def settings():
    return EngineSettings()


@pytest.fixture
def engine(system_dictionary, learning_dictionary, settings):
    return DictionaryEngine(system_dictionary, learning_dictionary, settings)


@pytest.fixture
def learning(learning_dictionary, connection_dictionary):
    return LearningManager(learning_dictionary, connection_dictionary)


@pytest.fixture
def prediction(connection_dictionary):
    return PredictionEngine(connection_dictionary)


@pytest.fixture
def sqlite_dictionary(tmp_path):
    """Writable SQLite dictionary in a temporary directory."""
    db = SqliteDictionary(str(tmp_path / "learning.sqlite"), name="learning")
    yield db
    db.close()
