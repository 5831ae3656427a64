"""
Entry points used by the plugin's install scripts.

``init_context`` does the one-off discovery work (locate the Xcode project,
parse it, load the Info.plist) and every other helper takes the resulting
``LinkContext``.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from . import info_plist, module_files
from . import project as xcode
from .constants import (
    MODULE_NAME,
    PBXPROJ_FILE_NAME,
    POD_INSTALL_COMMAND,
    PROJECT_DIR_ENV,
    SOURCE_DIR_NAME,
    TEMP_FILE_NAME,
)
from .project import ProjectModel
from .utils import run_inherited

logger = logging.getLogger(__name__)

__all__ = [
    "TEMP_FILE_NAME",
    "LinkContext",
    "init_context",
    "get_build_property",
    "reload_plist",
    "write_plist",
    "read_module_json",
    "write_module_json",
    "module_json_exists",
    "remove_module_json",
    "pod_install",
]


@dataclass
class LinkContext:
    module_dir: Path
    project_dir: Path
    source_dir: Path
    xcode_project: Optional[str] = None
    project: Optional[ProjectModel] = None
    plist: Optional[Dict[str, Any]] = None

    @property
    def pbxproj_path(self) -> Optional[Path]:
        if self.xcode_project is None:
            return None
        return self.project_dir / self.xcode_project / PBXPROJ_FILE_NAME


def init_context(
    module_dir: Optional[Union[str, Path]] = None,
    project_dir: Optional[Union[str, Path]] = None,
) -> LinkContext:
    """Locate and load the host app's Xcode project and Info.plist.

    ``module_dir`` defaults to the current directory, which is the plugin
    root when npm runs install scripts. ``project_dir`` defaults to
    ``$IOS_LINK_HELPERS_PROJECT_DIR`` or two levels above the plugin
    (``<app>/node_modules/<plugin>``).

    A missing project or Info.plist is not an error: the corresponding
    fields are left as ``None``.
    """
    module_path = Path(module_dir) if module_dir is not None else Path.cwd()
    if project_dir is None:
        project_dir = os.environ.get(PROJECT_DIR_ENV) or module_path.parent.parent
    project_path = Path(project_dir)
    ctx = LinkContext(
        module_dir=module_path,
        project_dir=project_path,
        source_dir=project_path / SOURCE_DIR_NAME,
    )

    ctx.xcode_project = xcode.find_project(project_path)
    logger.debug("[%s] moduleDirectory=%s", MODULE_NAME, ctx.module_dir)
    logger.debug("[%s] projectDirectory=%s", MODULE_NAME, ctx.project_dir)
    logger.debug("[%s] sourceDirectory=%s", MODULE_NAME, ctx.source_dir)
    logger.debug("[%s] xcodeProjectDirectory=%s", MODULE_NAME, ctx.xcode_project)

    if ctx.pbxproj_path is not None:
        ctx.project = xcode.load_project_model(ctx.pbxproj_path)
        ctx.plist = info_plist.read_plist(ctx.source_dir, ctx.project)
    return ctx


def get_build_property(ctx: LinkContext, name: str) -> Optional[Any]:
    if ctx.project is None:
        return None
    return xcode.get_build_property(ctx.project, name)


def reload_plist(ctx: LinkContext) -> Optional[Dict[str, Any]]:
    ctx.plist = info_plist.read_plist(ctx.source_dir, ctx.project)
    return ctx.plist


def write_plist(ctx: LinkContext, plist: Dict[str, Any]) -> Path:
    # ctx.plist is left untouched; call reload_plist to pick up the new file.
    return info_plist.write_plist(ctx.source_dir, ctx.project, plist)


def read_module_json(ctx: LinkContext, filename: str) -> Any:
    return module_files.read_module_json(ctx.module_dir, filename)


def write_module_json(ctx: LinkContext, filename: str, contents: Any) -> Path:
    return module_files.write_module_json(ctx.module_dir, filename, contents)


def module_json_exists(ctx: LinkContext, filename: str) -> bool:
    return module_files.module_json_exists(ctx.module_dir, filename)


def remove_module_json(ctx: LinkContext, filename: str) -> None:
    module_files.remove_module_json(ctx.module_dir, filename)


def pod_install(ctx: LinkContext) -> None:
    """Run ``pod install`` in the app's ios folder, ignoring any failure."""
    try:
        run_inherited(POD_INSTALL_COMMAND, cwd=ctx.source_dir)
    except Exception as exc:
        logger.debug("pod install failed in %s: %s", ctx.source_dir, exc)
