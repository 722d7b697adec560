"""
Configuration management for the Vitamin D screening service
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv


# Base paths
BASE_DIR = Path(__file__).parent.parent.parent

load_dotenv(BASE_DIR / ".env")


class Config:
    """Main configuration class for the screening service"""

    def __init__(self):
        # Scoring engine
        self.scoring_config = {
            'active_scheme': os.getenv('VITD_ACTIVE_SCHEME', 'scheme_c'),
            'strict_answers': True,  # unknown question ids raise instead of being dropped
        }

        # Caller-side validation of mandatory patient facts
        self.validation_config = {
            'age_min': 1,
            'age_max': 120,
            'weight_min_kg': 0.0,  # exclusive
        }

        # HTTP API
        self.api_config = {
            'title': 'Vitamin D Screening API',
            'version': '1.0.0',
            'cors_origins': ['http://localhost:5173', 'http://localhost:3000'],
        }

        # Logging
        self.logging_config = {
            'level': os.getenv('LOG_LEVEL', 'INFO'),
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        }

    def get_engine_config(self) -> Dict[str, Any]:
        """Get the settings the scoring engine consumes"""
        return {**self.scoring_config, **self.validation_config}

    def update_config(self, section: str, updates: Dict[str, Any]) -> None:
        """Update a configuration section"""
        if hasattr(self, f'{section}_config'):
            config = getattr(self, f'{section}_config')
            config.update(updates)
        else:
            raise ValueError(f"Unknown configuration section: {section}")

    def load_file(self, path: Union[str, Path]) -> None:
        """Apply overrides from a YAML file of ``section: {key: value}`` blocks"""
        with open(path) as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        for section, updates in overrides.items():
            self.update_config(section, updates or {})


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    cfg = Config()
    path = path or os.getenv('VITD_CONFIG_FILE')
    if path:
        cfg.load_file(path)
    return cfg


# Global configuration instance
config = load_config()
