import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import console

# Load environment variables from .env file
load_dotenv()

# Environment variables override config file values: PRETTYTERM_<KEY>
ENV_PREFIX = "PRETTYTERM_"

# File Paths
PRETTYTERM_DIR = Path(os.getenv("PRETTYTERM_DIR", str(Path.home() / ".prettyterm")))
CONFIG_FILE = Path(os.getenv("PRETTYTERM_CONFIG_FILE", str(PRETTYTERM_DIR / "config.json")))

# Configuration Defaults
DEFAULT_CONFIG = {
    "TERMINAL_WIDTH": "",
    "TERMINAL_HEIGHT": "",
    "BRANCH_STYLE": "unicode",
    "LOGGER_STYLE": "tiny",
    "LOG_FILE": str(PRETTYTERM_DIR / "prettyterm.log"),
    "HINT_COLOR": "blue",
    "ERROR_COLOR": "red",
    "SUCCESS_COLOR": "green",
    "WARNING_COLOR": "yellow",
    "HINT_ICON": "🛈",
    "ERROR_ICON": "✗",
    "SUCCESS_ICON": "✓",
    "WARNING_ICON": "⚠",
}


def ensure_prettyterm_dir():
    """Ensure the prettyterm storage directory exists"""
    if not PRETTYTERM_DIR.exists():
        try:
            PRETTYTERM_DIR.mkdir(parents=True, exist_ok=True)
        except Exception as e:
            console.print(
                f"[yellow]Warning: Could not create directory {PRETTYTERM_DIR}: {e}[/yellow]"
            )


def load_config() -> dict[str, Any]:
    """Load configuration from file"""
    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE, encoding="utf-8") as f:
                config: dict[str, Any] = json.load(f)
                return config
        except Exception as e:
            console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def save_config(config: dict[str, Any]) -> bool:
    """Save configuration to file"""
    try:
        ensure_prettyterm_dir()
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2, ensure_ascii=False)
        return True
    except Exception as e:
        console.print(f"[red]Error saving config file: {e}[/red]")
        return False


def get_setting(key: str, default: str) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(ENV_PREFIX + key)
    if env_val:
        return env_val

    # 2. Config File
    config = load_config()
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def get_optional_int_setting(key: str) -> int | None:
    """Get a positive integer setting, or None when it is unset or invalid"""
    value = get_setting(key, DEFAULT_CONFIG.get(key, "")).strip()
    if not value:
        return None
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number <= 0:
        console.print(f"[yellow]Warning: Invalid value for {key}: {value}, ignoring it[/yellow]")
        return None
    return number


# Initialize Configuration
LOG_FILE = Path(get_setting("LOG_FILE", DEFAULT_CONFIG["LOG_FILE"]))
