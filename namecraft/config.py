"""Engine configuration loaded from YAML and the environment."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field, fields

import yaml


DEFAULT_CONFIG_PATH = "config/config.yaml"

DEFAULT_EXTENSIONS = ['.com', '.ai', '.io', '.org', '.net']


@dataclass
class EngineConfig:
    """Tunables for completion, domain lookups and logging."""

    # Completion
    model: str = "gpt-4o-mini"
    temperature: float = 0.8
    max_tokens: int = 4000
    completion_timeout: float = 30.0
    max_retries: int = 3
    backoff_base: float = 1.0

    # Domains
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    cache_ttl_minutes: float = 30.0
    provider_timeout: float = 10.0
    dns_timeout: float = 3.0
    batch_size: int = 5
    batch_delay: float = 1.0
    premium_price_threshold: float = 100.0
    use_whois: bool = True
    registrar_url: Optional[str] = None

    # Logging
    log_level: str = "WARNING"

    @property
    def cache_ttl_seconds(self) -> float:
        return self.cache_ttl_minutes * 60

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EngineConfig':
        """Build a config from a (possibly nested) mapping, ignoring unknown keys."""
        flat: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            if isinstance(value, dict):
                flat.update(value)
            else:
                flat[key] = value

        # logging.level in YAML maps onto log_level
        if 'level' in flat and 'log_level' not in flat:
            flat['log_level'] = flat.pop('level')

        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in flat.items() if k in known})


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> EngineConfig:
    """Load configuration from a YAML file, falling back to defaults."""
    data: Dict[str, Any] = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            data = yaml.safe_load(f) or {}

    config = EngineConfig.from_dict(data)

    model = os.environ.get('OPENAI_MODEL')
    if model:
        config.model = model
    registrar_url = os.environ.get('REGISTRAR_API_URL')
    if registrar_url:
        config.registrar_url = registrar_url

    return config
