"""
Configuration settings loaded from environment variables.

Every value has a default, so no .env file is required. To override, place a
.env file in the project root, or export variables with the CONTAINS_ prefix:

.env file may contain:
CONTAINS_SEQUENCE=[3, 8, 2, 5, 10]
CONTAINS_PRESENT_TARGET=5
CONTAINS_ABSENT_TARGET=99
CONTAINS_LOG_LEVEL=INFO
CONTAINS_VERIFICATION__MAX_LENGTH=5
"""

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from pathlib import Path
from typing import List, Optional


# ============================================================================
# VERIFICATION CONFIGURATION
# ============================================================================

class VerificationConfig(BaseModel):
    """
    Configuration for bounded Z3 verification of the membership variants.

    Nested under Settings.verification; override with
    CONTAINS_VERIFICATION__<FIELD> environment variables.
    """

    enabled: bool = Field(
        default=True,
        description="Allow the --verify option to run the Z3 verifier"
    )

    max_length: int = Field(
        default=4,
        ge=0,
        le=8,
        description="Verify every sequence length from 0 up to this bound"
    )

    timeout_ms: int = Field(
        default=5000,
        ge=100,
        le=60000,
        description="Per-check Z3 solver timeout (milliseconds)"
    )

    verbose_errors: bool = Field(
        default=True,
        description="Include counterexamples in failure messages"
    )


# ============================================================================
# MAIN SETTINGS
# ============================================================================

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and .env file.

    The defaults reproduce the fixed driver inputs: S = [3, 8, 2, 5, 10],
    queried once with a present target and once with an absent one.
    """

    # Driver inputs
    sequence: List[int] = Field(default_factory=lambda: [3, 8, 2, 5, 10])
    present_target: int = 5
    absent_target: int = 99

    # Logging
    log_level: str = "WARNING"

    # Verification
    verification: VerificationConfig = Field(
        default_factory=VerificationConfig,
        description="Bounded Z3 verification configuration"
    )

    model_config = SettingsConfigDict(
        env_prefix="CONTAINS_",
        env_file=Path(__file__).parent.parent / ".env",  # Look in project root
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def queries(self) -> List[int]:
        """Targets queried by the driver, in output order."""
        return [self.present_target, self.absent_target]


# ============================================================================
# Shared Settings Instance
# ============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Shared Settings instance, created on first use.

    Raises:
        pydantic.ValidationError: if an environment value is malformed
    """
    return Settings()


# ============================================================================
# Helper Functions
# ============================================================================

def print_settings(current: Optional[Settings] = None):
    """Print current settings."""
    current = current or get_settings()
    print("\n" + "="*70)
    print("CURRENT SETTINGS")
    print("="*70)
    print(f"Sequence:            {current.sequence}")
    print(f"Present Target:      {current.present_target}")
    print(f"Absent Target:       {current.absent_target}")
    print(f"Log Level:           {current.log_level}")

    print("\n" + "-"*70)
    print("VERIFICATION SETTINGS")
    print("-"*70)
    print(f"Enabled:             {current.verification.enabled}")
    print(f"Max Length:          {current.verification.max_length}")
    print(f"Timeout:             {current.verification.timeout_ms}ms")
    print(f"Verbose Errors:      {current.verification.verbose_errors}")
    print("="*70 + "\n")


if __name__ == "__main__":
    print_settings()
