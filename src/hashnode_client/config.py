"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


DEFAULT_PUBLICATION_HOST = "yourblog.hashnode.dev"


@dataclass
class HashnodeConfig:
    """Hashnode API settings."""
    api_url: str = "https://gql.hashnode.com"
    publication_host: str = DEFAULT_PUBLICATION_HOST
    publication_id: Optional[str] = None
    timeout: float = 15.0
    max_posts_per_request: int = 20
    default_posts_count: int = 10
    max_comments_per_request: int = 50
    user_agent: str = "hashnode-client/0.1"


@dataclass
class Settings:
    """Application settings."""
    
    # Secrets (from environment only)
    access_token: Optional[str] = None
    webhook_secret: Optional[str] = None
    
    # Config sections
    hashnode: HashnodeConfig = field(default_factory=HashnodeConfig)
    
    @property
    def api_url(self) -> str:
        return self.hashnode.api_url
    
    @property
    def publication_host(self) -> str:
        return self.hashnode.publication_host
    
    @property
    def publication_id(self) -> Optional[str]:
        return self.hashnode.publication_id
    
    @property
    def timeout(self) -> float:
        return self.hashnode.timeout
    
    @property
    def max_posts_per_request(self) -> int:
        return self.hashnode.max_posts_per_request
    
    @property
    def default_posts_count(self) -> int:
        return self.hashnode.default_posts_count
    
    @property
    def max_comments_per_request(self) -> int:
        return self.hashnode.max_comments_per_request


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}
    
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment.
    
    Environment wins over YAML for the publication host, so a deployment
    can point a shared config file at a different blog.
    """
    config = load_config(config_path)
    
    settings = Settings(
        access_token=os.getenv("HASHNODE_TOKEN") or None,
        webhook_secret=os.getenv("HASHNODE_WEBHOOK_SECRET") or None,
    )
    
    if "hashnode" in config:
        for key, value in (config["hashnode"] or {}).items():
            if not hasattr(settings.hashnode, key):
                raise ValueError(f"Unknown hashnode config key: {key}")
            setattr(settings.hashnode, key, value)
    
    publication_host = os.getenv("HASHNODE_PUBLICATION_HOST")
    if publication_host:
        settings.hashnode.publication_host = publication_host
    
    publication_id = os.getenv("HASHNODE_PUBLICATION_ID")
    if publication_id:
        settings.hashnode.publication_id = publication_id
    
    return settings
