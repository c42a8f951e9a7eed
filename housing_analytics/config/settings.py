"""Settings configuration for housing analytics."""

from dataclasses import dataclass
from typing import Optional, Dict, Any
import json

from . import constants
from ..utils.exceptions import ConfigurationError


@dataclass
class Settings:
    """Configuration settings for housing analytics."""
    
    # Data paths
    properties_path: Optional[str] = None
    population_path: Optional[str] = None
    violations_path: Optional[str] = None
    violations_format: str = "csv"
    
    # Processing parameters
    max_workers: Optional[int] = None  # Batch worker threads (None = all CPUs)
    fines_state: str = constants.DEFAULT_FINES_STATE
    top_violation_types: int = constants.TOP_VIOLATION_TYPES
    
    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    
    @classmethod
    def from_json(cls, json_path: str) -> "Settings":
        """Load settings from JSON file."""
        with open(json_path, 'r') as f:
            config = json.load(f)
        return cls(**config)
    
    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Settings":
        """Create settings from dictionary."""
        return cls(**config_dict)
    
    def to_json(self, json_path: str) -> None:
        """Save settings to JSON file."""
        config_dict = {
            k: v for k, v in self.__dict__.items() 
            if v is not None
        }
        with open(json_path, 'w') as f:
            json.dump(config_dict, f, indent=2)
    
    def validate(self) -> None:
        """Validate settings consistency."""
        if self.violations_format not in constants.SUPPORTED_VIOLATION_FORMATS:
            raise ConfigurationError(
                'Format should be listed as either "json" or "csv"'
            )
        
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError("Maximum workers must be at least 1")
        
        if len(self.fines_state) != 2:
            raise ConfigurationError("Fines state must be a 2-letter code")
        
        if self.top_violation_types < 1:
            raise ConfigurationError("Top violation types must be at least 1")
        
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")


def get_default_settings() -> Settings:
    """Get default settings instance."""
    return Settings()
