"""
Runtime configuration read from environment variables.

Required Environment Variables (only when the Supabase store is used):
    SUPABASE_URL: The Supabase project URL.
    SUPABASE_KEY: The Supabase API key.

Optional:
    DESIGNS_TABLE: Table holding design rows (default "designs").
    REPLACE_DESIGN_RPC: Stored procedure merging two designs (default "replace_and_delete_design").
    DESIGN_SIMILARITY_THRESHOLD: Percentage above which names count as similar (default 80).
    LOG_LEVEL: Logging level name (default INFO).
    DEBUG: "true" forces DEBUG logging.
"""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Local development only; deployed functions get these from the runtime settings
load_dotenv()


class Settings(BaseModel):
    """Application settings."""
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    designs_table: str = "designs"
    replace_design_rpc: str = "replace_and_delete_design"
    similarity_threshold: float = Field(default=80.0, ge=0.0, le=100.0)
    log_level: str = "INFO"
    debug: bool = False

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            supabase_url=os.getenv("SUPABASE_URL"),
            supabase_key=os.getenv("SUPABASE_KEY"),
            designs_table=os.getenv("DESIGNS_TABLE", "designs"),
            replace_design_rpc=os.getenv("REPLACE_DESIGN_RPC", "replace_and_delete_design"),
            similarity_threshold=float(os.getenv("DESIGN_SIMILARITY_THRESHOLD", "80")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            debug=os.getenv("DEBUG", "false").lower() == "true",
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings.from_env()
