"""Next-candidate prediction from the connection (bigram) dictionary."""

from typing import List, Optional

from yomi.dictionary import BaseDictionaryInterface
from yomi.logger import logger
from yomi.schema import Candidate, connection_key, decode_candidate


class PredictionEngine:
    """Suggest candidates that historically followed the last committed one."""

    def __init__(self, connection: BaseDictionaryInterface):
        self.connection = connection

    def predict(self, last: Optional[Candidate]) -> Optional[List[Candidate]]:
        """Exact bigram lookup; None when there is no context or no history."""
        if last is None:
            return None
        try:
            entries = self.connection.find_exact(connection_key(last))
        except Exception:
            logger.exception(f"Prediction lookup failed for '{last.value}'")
            return None
        if not entries:
            return None

        predictions = []
        for entry in entries:
            candidate = decode_candidate(entry)
            if candidate is None:
                logger.debug(f"Ignoring malformed connection entry {entry!r}")
                continue
            predictions.append(candidate)
        return predictions or None
