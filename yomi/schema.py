from typing import Optional

from pydantic import BaseModel, ConfigDict

CONNECTION_SEPARATOR = " "


class Candidate(BaseModel):
    key: str    # reading or raw input the value was found under
    value: str  # displayable word or phrase
    model_config = ConfigDict(frozen=True, extra="forbid")

    def __str__(self) -> str:
        return f"{self.key}\t{self.value}"


def encode_candidate(candidate: Candidate) -> str:
    return f"{candidate.key}{CONNECTION_SEPARATOR}{candidate.value}"


def connection_key(candidate: Candidate) -> str:
    """Key of the bigram entry listing the candidates that followed *candidate*."""
    return encode_candidate(candidate)


def decode_candidate(entry: str) -> Optional[Candidate]:
    """Parse a stored ``"<key> <value>"`` entry; None when it cannot be split."""
    key, sep, value = entry.partition(CONNECTION_SEPARATOR)
    if not sep or not key or not value:
        return None
    return Candidate(key=key, value=value)
