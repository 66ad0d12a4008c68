"""Configuration and data management for fontfakery"""

import json
import os
import platform
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .utils.logging import FontFakeryLogger

DATA_DIR_ENV = "FONTFAKERY_DATA_DIR"


class DataManager:
    """Manages fontfakery data files with user override support"""

    def __init__(self, user_data_dir: Optional[Path] = None):
        # Package data directory (built-in defaults)
        self.package_data_dir = Path(__file__).parent / "data"

        # User data directory (overrides), not created until something is saved there
        self.user_data_dir = Path(user_data_dir) if user_data_dir else self._get_user_data_dir()

    def _get_user_data_dir(self) -> Path:
        """Get user data directory based on OS or environment variable"""
        if custom_dir := os.environ.get(DATA_DIR_ENV):
            return Path(custom_dir).expanduser()

        system = platform.system()

        if system == "Darwin":  # macOS
            return Path.home() / "Library" / "Application Support" / "fontfakery"
        elif system == "Windows":
            app_data = os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming")
            return Path(app_data) / "fontfakery"
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
            return Path(xdg_config) / "fontfakery"

    def load_data_file(self, filename: str) -> Dict[str, Any]:
        """Load data file with user override priority"""
        user_file = self.user_data_dir / filename
        if user_file.exists():
            return self._load_file(user_file)

        package_file = self.package_data_dir / filename
        if package_file.exists():
            return self._load_file(package_file)

        return {}

    def _load_file(self, filepath: Path) -> Dict[str, Any]:
        """Load JSON or YAML file based on extension"""
        try:
            with open(filepath, encoding="utf-8") as f:
                if filepath.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            FontFakeryLogger.warning(f"Error loading {filepath}: {e}")
            return {}

        if not isinstance(data, dict):
            if data is not None:
                FontFakeryLogger.warning(f"Ignoring {filepath}: expected a mapping at top level")
            return {}
        return data


# Singleton instance
_data_manager = None


def get_data_manager() -> DataManager:
    """Get or create the data manager singleton"""
    global _data_manager
    if _data_manager is None:
        _data_manager = DataManager()
    return _data_manager


def reset_data_manager() -> None:
    """Forget the singleton so the next call re-reads the environment"""
    global _data_manager
    _data_manager = None


def load_style_names() -> Dict[str, Any]:
    """Load style-names.yaml with user overrides"""
    return get_data_manager().load_data_file("style-names.yaml")
