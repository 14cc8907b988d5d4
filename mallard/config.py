"""Configuration settings for mallard.

Uses Pydantic Settings for validation and environment variable support.
All settings can be overridden via MALLARD_* environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class MallardConfig(BaseSettings):
    """Global configuration for the duck simulator and CLI."""

    # Pond
    pond_archetypes: list[str] = Field(
        default=["mallard", "redhead", "rubber", "decoy", "model"]
    )
    include_duck_call: bool = True  # add a DuckCall next to the ducks

    # Runtime behavior swap
    upgrade_actor: str = "model"  # "" disables the swap
    upgrade_locomote: str = "rocket"

    # Plugins
    plugin_dirs: list[str] = Field(default_factory=list)

    # Output
    silence_marker: str = "<< Silence >>"
    log_level: str = "WARNING"

    model_config = {"env_prefix": "MALLARD_"}
