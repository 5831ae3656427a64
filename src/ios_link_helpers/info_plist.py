from __future__ import annotations

import logging
import plistlib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .constants import INFOPLIST_SETTING, SRCROOT_TOKEN
from .project import ProjectModel, get_build_property

logger = logging.getLogger(__name__)


def resolve_plist_path(
    source_dir: Union[str, Path], project: Optional[ProjectModel]
) -> Optional[Path]:
    """Absolute path of the first target's Info.plist, or ``None``.

    ``INFOPLIST_FILE`` is taken relative to the source directory once
    quotes and the ``$(SRCROOT)`` prefix are removed.
    """
    if project is None:
        return None
    plist_file = get_build_property(project, INFOPLIST_SETTING)
    if not plist_file:
        return None
    cleaned = str(plist_file).replace('"', "").replace(SRCROOT_TOKEN, "", 1)
    return Path(source_dir) / cleaned.lstrip("/")


def read_plist(
    source_dir: Union[str, Path], project: Optional[ProjectModel]
) -> Optional[Dict[str, Any]]:
    path = resolve_plist_path(source_dir, project)
    if path is None or not path.exists():
        logger.debug("Info.plist not available (resolved path: %s)", path)
        return None
    with path.open("rb") as fp:
        return plistlib.load(fp)


def write_plist(
    source_dir: Union[str, Path],
    project: Optional[ProjectModel],
    plist: Dict[str, Any],
) -> Path:
    path = resolve_plist_path(source_dir, project)
    if path is None:
        raise FileNotFoundError(
            f"Cannot resolve {INFOPLIST_SETTING} for the Xcode project in {source_dir}"
        )
    with path.open("wb") as fp:
        plistlib.dump(plist, fp)
    logger.debug("Wrote Info.plist to %s", path)
    return path
