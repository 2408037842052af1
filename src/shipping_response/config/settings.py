"""
Centralized settings for the shipping response helper.
"""
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

import pandas as pd


DEFAULT_CARRIERS = ('fedex', 'usps', 'ups')


def get_package_root() -> Path:
    """Get the package directory (where config/ lives)."""
    return Path(__file__).resolve().parent.parent


def load_carriers(path: Path) -> tuple[str, ...]:
    """
    Load the known carrier tokens from a CSV file.

    Expects a `carrier` column and an optional `active` column.
    Falls back to DEFAULT_CARRIERS when the file is missing or empty.
    """
    if not path.exists():
        return DEFAULT_CARRIERS

    df = pd.read_csv(path, dtype=str).fillna('')
    df.columns = [c.strip().lower() for c in df.columns]
    if 'carrier' not in df.columns:
        return DEFAULT_CARRIERS

    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()

    if 'active' in df.columns:
        df = df[df['active'].str.lower() != 'false']

    carriers = [c.lower() for c in df['carrier'] if c]
    # Preserve file order, drop duplicates
    carriers = tuple(dict.fromkeys(carriers))
    return carriers or DEFAULT_CARRIERS


@dataclass
class Settings:
    """Helper settings with sensible defaults."""

    # Config paths
    carriers_csv: Path

    # Carrier tokens recognised in free-text selectors
    carriers: tuple = DEFAULT_CARRIERS

    # Custom rate ids are shifted into the reserved range above this value
    custom_id_offset: int = 10000

    @classmethod
    def load(cls, carriers_csv: Optional[Path] = None) -> 'Settings':
        """Load settings from the package structure."""
        root = get_package_root()
        csv_path = carriers_csv or root / 'config' / 'carriers.csv'

        return cls(
            carriers_csv=csv_path,
            carriers=load_carriers(csv_path),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
