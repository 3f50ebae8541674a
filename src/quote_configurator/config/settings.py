"""
Centralized settings and path configuration for the configurator.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Directory holding one <site_slug>.json record file per site
    data_dir: Path

    # Site used when a request names none
    default_site: str = 'assymo'

    log_level: str = 'INFO'

    # API server
    host: str = '127.0.0.1'
    port: int = 8000
    reload: bool = False

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings from the environment and project structure."""
        root = project_root or get_project_root()

        data_dir = os.environ.get('CONFIGURATOR_DATA_DIR')
        return cls(
            data_dir=Path(data_dir) if data_dir else root / 'data',
            default_site=os.environ.get('CONFIGURATOR_DEFAULT_SITE', 'assymo'),
            log_level=os.environ.get('CONFIGURATOR_LOG_LEVEL', 'INFO').upper(),
            host=os.environ.get('CONFIGURATOR_HOST', '127.0.0.1'),
            port=int(os.environ.get('CONFIGURATOR_PORT', '8000')),
            reload=os.environ.get('CONFIGURATOR_RELOAD', 'false').lower() in ('1', 'true', 'yes'),
        )

    def site_file(self, site_slug: str) -> Path:
        """Path of the record file for a site."""
        return self.data_dir / f'{site_slug}.json'


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
