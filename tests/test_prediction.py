"""Tests for next-candidate prediction."""
from unittest.mock import Mock
from yomi.dictionary import InMemoryDictionary, NullDictionary
from yomi.prediction import PredictionEngine
from yomi.schema import Candidate


class TestPredictionEngine:
    def test_predicts_followers(self, learning, prediction):
        prev = Candidate(key="わたし", value="私")
        learning.commit_connection(prev, Candidate(key="は", value="は"))
        assert prediction.predict(prev) == [Candidate(key="は", value="は")]

    def test_followers_most_recent_first(self, learning, prediction):
        prev = Candidate(key="わたし", value="私")
        learning.commit_connection(prev, Candidate(key="は", value="は"))
        learning.commit_connection(prev, Candidate(key="の", value="の"))
        assert [c.value for c in prediction.predict(prev)] == ["の", "は"]

    def test_lookup_is_exact(self, learning, prediction):
        learning.commit_connection(Candidate(key="わたし", value="私"), Candidate(key="は", value="は"))
        assert prediction.predict(Candidate(key="わたし", value="渡し")) is None
        assert prediction.predict(Candidate(key="わた", value="私")) is None

    def test_no_context(self, prediction):
        assert prediction.predict(None) is None

    def test_no_history(self, prediction):
        assert prediction.predict(Candidate(key="き", value="木")) is None

    def test_value_may_contain_separator(self):
        connection = InMemoryDictionary("connection", {"き 木": ["の ? x"]})
        predicted = PredictionEngine(connection).predict(Candidate(key="き", value="木"))
        assert predicted == [Candidate(key="の", value="? x")]

    def test_malformed_entries_are_skipped(self):
        connection = InMemoryDictionary("connection", {"き 木": ["broken", " x", "の の"]})
        predicted = PredictionEngine(connection).predict(Candidate(key="き", value="木"))
        assert predicted == [Candidate(key="の", value="の")]

    def test_only_malformed_entries(self):
        connection = InMemoryDictionary("connection", {"き 木": ["broken"]})
        assert PredictionEngine(connection).predict(Candidate(key="き", value="木")) is None

    def test_unavailable_connection_dictionary(self):
        assert PredictionEngine(NullDictionary("connection")).predict(Candidate(key="き", value="木")) is None

    def test_never_raises(self):
        connection = Mock()
        connection.find_exact.side_effect = RuntimeError("boom")
        assert PredictionEngine(connection).predict(Candidate(key="き", value="木")) is None
