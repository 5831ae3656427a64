"""Post-install helpers for the iOS side of react-native-launch-navigator."""
from __future__ import annotations

__version__ = "0.1.0"

from .helpers import (  # noqa: E402
    TEMP_FILE_NAME,
    LinkContext,
    get_build_property,
    init_context,
    module_json_exists,
    pod_install,
    read_module_json,
    reload_plist,
    remove_module_json,
    write_module_json,
    write_plist,
)

__all__ = [
    "TEMP_FILE_NAME",
    "LinkContext",
    "get_build_property",
    "init_context",
    "module_json_exists",
    "pod_install",
    "read_module_json",
    "reload_plist",
    "remove_module_json",
    "write_module_json",
    "write_plist",
    "__version__",
]
