from __future__ import annotations

import json
from pathlib import Path


def write_config(
    path: Path,
    sort_keys: bool = True,
    ensure_ascii: bool = False,
    log_level: str = "WARNING",
) -> Path:
    out = path / "config.yaml"
    out.write_text(
        "\n".join(
            [
                f"sort_keys: {str(sort_keys).lower()}",
                f"ensure_ascii: {str(ensure_ascii).lower()}",
                f"log_level: {log_level}",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return out


def write_input(path: Path, text: str, name: str = "input.json") -> Path:
    out = path / name
    out.write_text(text, encoding="utf-8")
    return out


def sample_connection() -> dict:
    return {
        "Server": "192.168.1.1",
        "Database": "cool_db",
        "User_Id": "super_user",
        "Password": "kRp-CK@D2DCc3d9QoZG3WBBg@i2j!g",
    }


def sample_profile_text() -> str:
    return json.dumps({"name": "John Doe", "age": 30, "hobbies": ["reading", "coding"]})
