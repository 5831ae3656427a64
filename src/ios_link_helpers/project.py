"""
Xcode project discovery and build-setting lookup.

The parsed ``project.pbxproj`` is flattened into a small ``ProjectModel``
(targets, configuration lists, build configurations) so that the
build-setting lookup does not depend on the parser's object model.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pbxproj import XcodeProject

from .constants import EXCLUDED_DIRS, IOS_BASE_PATTERN, XCODEPROJ_GLOB
from .utils import relative_path

logger = logging.getLogger(__name__)


@dataclass
class BuildConfiguration:
    name: str
    build_settings: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ConfigurationList:
    build_configurations: List[str] = field(default_factory=list)
    default_configuration_name: Optional[str] = None


@dataclass
class BuildTarget:
    name: str
    build_configuration_list: Optional[str] = None


@dataclass
class ProjectModel:
    targets: List[BuildTarget] = field(default_factory=list)
    configuration_lists: Dict[str, ConfigurationList] = field(default_factory=dict)
    configurations: Dict[str, BuildConfiguration] = field(default_factory=dict)

    @classmethod
    def from_xcode_project(cls, project: XcodeProject) -> "ProjectModel":
        """Flatten the targets of a parsed project, in declaration order."""
        model = cls()
        root = project.get_object(project.rootObject)
        for target_id in getattr(root, "targets", None) or []:
            target = project.get_object(target_id)
            if target is None:
                continue
            list_id = getattr(target, "buildConfigurationList", None)
            model.targets.append(
                BuildTarget(
                    name=str(getattr(target, "name", "")),
                    build_configuration_list=str(list_id) if list_id else None,
                )
            )
            if not list_id or str(list_id) in model.configuration_lists:
                continue
            config_list = project.get_object(list_id)
            if config_list is None:
                continue
            refs = list(getattr(config_list, "buildConfigurations", None) or [])
            default_name = getattr(config_list, "defaultConfigurationName", None)
            model.configuration_lists[str(list_id)] = ConfigurationList(
                build_configurations=[str(ref) for ref in refs],
                default_configuration_name=str(default_name) if default_name is not None else None,
            )
            for ref in refs:
                config = project.get_object(ref)
                if config is None:
                    continue
                model.configurations[str(ref)] = BuildConfiguration(
                    name=str(getattr(config, "name", "")),
                    build_settings=_settings_dict(getattr(config, "buildSettings", None)),
                )
        return model


def _settings_dict(settings: Any) -> Dict[str, Any]:
    if settings is None:
        return {}
    if isinstance(settings, Mapping):
        return dict(settings)
    # pbxproj keeps each setting as an attribute; private ones are bookkeeping.
    return {
        key: value
        for key, value in vars(settings).items()
        if not key.startswith("_")
    }


def find_project(folder: Union[str, Path]) -> Optional[str]:
    """Return the first ``*.xcodeproj`` below ``folder`` living under an ios folder.

    CocoaPods and npm dependency folders are skipped. The result is relative
    to ``folder``; ``None`` when nothing qualifies.
    """
    root = Path(folder)
    if not root.is_dir():
        logger.debug("Project search root %s does not exist", root)
        return None
    projects: List[str] = []
    for path in sorted(root.rglob(XCODEPROJ_GLOB)):
        rel = path.relative_to(root)
        if any(part in EXCLUDED_DIRS for part in rel.parts):
            continue
        if not IOS_BASE_PATTERN.search(rel.parent.as_posix()):
            continue
        projects.append(relative_path(path, root))

    if not projects:
        logger.debug("No Xcode project found under %s", root)
        return None
    return projects[0]


def load_project_model(pbxproj_path: Union[str, Path]) -> ProjectModel:
    project = XcodeProject.load(str(pbxproj_path))
    return ProjectModel.from_xcode_project(project)


def default_build_configuration(
    configuration_list: ConfigurationList,
    configurations: Mapping[str, BuildConfiguration],
) -> Optional[BuildConfiguration]:
    """Pick the configuration named as the list's default.

    Falls back to the first configuration in declared order. Later
    configurations sharing the default name win over earlier ones.
    """
    refs = configuration_list.build_configurations
    if not refs:
        return None
    selected = configurations.get(refs[0])
    for ref in refs:
        config = configurations.get(ref)
        if config is not None and config.name == configuration_list.default_configuration_name:
            selected = config
    return selected


def get_build_property(project: ProjectModel, name: str) -> Optional[Any]:
    # Only the first target is consulted: React Native templates declare a
    # tvOS target after the app, and its settings must not leak through.
    if not project.targets:
        return None
    first_target = project.targets[0]
    configuration_list = project.configuration_lists.get(
        first_target.build_configuration_list or ""
    )
    if configuration_list is None:
        return None
    config = default_build_configuration(configuration_list, project.configurations)
    if config is None:
        return None
    return config.build_settings.get(name)
