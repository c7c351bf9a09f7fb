import tomllib
import shutil
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import load_dotenv
import os

CONFIG_DIR = Path.home() / ".chesstrack"
CONFIG_PATH = CONFIG_DIR / "config.toml"
PROJECT_CONFIG_EXAMPLE = Path(__file__).parent / "config.toml"

def load_config() -> Dict[str, Any]:
    """Load config from ~/.chesstrack/config.toml, copy example if missing, load .env overrides."""
    load_dotenv()  # Load .env for overrides (e.g., CHESSTRACK_PORT env var)
    if not CONFIG_PATH.exists():
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        shutil.copy(PROJECT_CONFIG_EXAMPLE, CONFIG_PATH)
    with open(CONFIG_PATH, "rb") as f:
        config = tomllib.load(f)

    server_cfg = config.get("server", {})
    config["server"] = {
        "host": os.getenv("CHESSTRACK_HOST", server_cfg.get("host", "127.0.0.1")),
        "port": int(os.getenv("CHESSTRACK_PORT", server_cfg.get("port", 8000))),
    }
    logging_cfg = config.get("logging", {})
    config["logging"] = {
        "level": os.getenv("CHESSTRACK_LOG_LEVEL", logging_cfg.get("level", "INFO")).upper(),
    }
    ratings_cfg = config.get("ratings", {})
    config["ratings"] = {
        "default_elo": int(os.getenv("CHESSTRACK_DEFAULT_ELO", ratings_cfg.get("default_elo", 1200))),
        "recent_window": int(os.getenv("CHESSTRACK_RECENT_WINDOW", ratings_cfg.get("recent_window", 10))),
    }
    engine_cfg = config.get("engine", {})
    config["engine"] = {
        "depth": int(os.getenv("CHESSTRACK_ENGINE_DEPTH", engine_cfg.get("depth", 15))),
        "preferred": os.getenv("CHESSTRACK_ENGINE", engine_cfg.get("preferred", "stockfish17")),
    }
    return config

def get_config_value(section: str, key: str, default: Optional[Any] = None) -> Any:
    """Get nested config value, e.g., get_config_value('engine', 'depth')."""
    config = load_config()
    value = config.get(section, {}).get(key, default)
    return value
