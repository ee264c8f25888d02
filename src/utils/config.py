"""
Environment-driven settings for the cycle API.
"""
import os
from dataclasses import dataclass

from src.services.constants import PREDICTION_WINDOW


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the Lambda environment."""
    table_name: str
    stage: str = "dev"
    log_level: str = "INFO"
    prediction_window: int = PREDICTION_WINDOW


def load_settings() -> Settings:
    """
    Build settings from environment variables.

    CYCLE_TABLE_NAME names the DynamoDB table. When it is unset the name is
    derived from STAGE as CycleTable-{STAGE}, but only if STAGE is set.

    Raises:
        EnvironmentError: If neither CYCLE_TABLE_NAME nor STAGE is set
    """
    stage = os.environ.get("STAGE")
    table_name = os.environ.get("CYCLE_TABLE_NAME")
    if not table_name:
        if not stage:
            raise EnvironmentError(
                "CYCLE_TABLE_NAME environment variable not set. "
                "This variable must be set to the DynamoDB table name."
            )
        table_name = f"CycleTable-{stage}"

    return Settings(
        table_name=table_name,
        stage=stage or "dev",
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        prediction_window=int(os.environ.get("PREDICTION_WINDOW", PREDICTION_WINDOW))
    )
