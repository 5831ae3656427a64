"""
Search patterns, file names and commands used by the iOS link helpers.

The project search mirrors the React Native CLI's own ``findProject``:
every ``*.xcodeproj`` below the app root, minus CocoaPods and npm
dependency folders, restricted to paths living under an ``ios`` folder.
"""
from __future__ import annotations

import re

# =============================================================================
# PROJECT LOCATOR
# =============================================================================
XCODEPROJ_GLOB = "*.xcodeproj"
IOS_BASE_PATTERN = re.compile(r"ios")
EXCLUDED_DIRS = frozenset({"Pods", "node_modules"})
PBXPROJ_FILE_NAME = "project.pbxproj"

# =============================================================================
# INFO.PLIST
# =============================================================================
INFOPLIST_SETTING = "INFOPLIST_FILE"
SRCROOT_TOKEN = "$(SRCROOT)"

# =============================================================================
# PLUGIN LAYOUT
# =============================================================================
MODULE_NAME = "react-native-launch-navigator"
SOURCE_DIR_NAME = "ios"
TEMP_FILE_NAME = "injectedQuerySchemes.json.tmp"
PROJECT_DIR_ENV = "IOS_LINK_HELPERS_PROJECT_DIR"

# =============================================================================
# NATIVE DEPENDENCIES
# =============================================================================
POD_INSTALL_COMMAND = ("pod", "install")
