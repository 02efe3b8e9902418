"""Default configuration parameters for the septem command line harness."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DefaultConfig:
    """CLI defaults; overridden by a YAML file and then by flags."""
    lowercase: bool = False                          # Print numerals in lower case
    checked: bool = True                             # Reject 0 and values > 3999
    log_level: str = "WARNING"                       # stdlib level name
    log_json: bool = False                           # JSONRenderer instead of console


def get_default_config() -> DefaultConfig:
    """Get default configuration."""
    return DefaultConfig()
