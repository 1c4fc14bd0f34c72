import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from yomi import DICTIONARIES_DIR

ENV_PREFIX = "YOMI_"


class EngineSettings(BaseModel):
    """Read-only engine configuration.

    The values are owned by the preferences collaborator; the engine only
    consumes them. ``search_limit`` and ``completion_length_delta`` bound the
    completion scan so its cost does not depend on the dictionary size.
    """
    convert_halfkana: bool = False
    search_limit: int = Field(50, ge=1)
    completion_length_delta: int = Field(3, ge=0)
    data_dir: Optional[str] = None
    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def dictionaries_dir(self) -> str:
        return self.data_dir or DICTIONARIES_DIR

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from ``YOMI_*`` environment variables (and ``.env``)."""
        load_dotenv()
        values = {}
        for field_name in cls.model_fields:
            raw = os.getenv(ENV_PREFIX + field_name.upper())
            if raw is not None and raw != "":
                values[field_name] = raw
        return cls.model_validate(values)


DEFAULT_SETTINGS = EngineSettings()
