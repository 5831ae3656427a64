"""JSON files kept next to the plugin itself, never inside the host app."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union


def module_file_path(module_dir: Union[str, Path], filename: str) -> Path:
    return Path(module_dir) / filename


def read_module_json(module_dir: Union[str, Path], filename: str) -> Any:
    path = module_file_path(module_dir, filename)
    with path.open("r", encoding="utf-8") as fp:
        return json.load(fp)


def write_module_json(module_dir: Union[str, Path], filename: str, contents: Any) -> Path:
    path = module_file_path(module_dir, filename)
    with path.open("w", encoding="utf-8") as fp:
        json.dump(contents, fp)
    return path


def module_json_exists(module_dir: Union[str, Path], filename: str) -> bool:
    return module_file_path(module_dir, filename).exists()


def remove_module_json(module_dir: Union[str, Path], filename: str) -> None:
    module_file_path(module_dir, filename).unlink()
