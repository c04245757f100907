# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Maintain ``latest`` and ``dev`` pointers to the newest documentation versions.

The web server follows symlinks, so after the site is published every
component directory gets a ``latest`` entry pointing at its newest stable
version and a ``dev`` entry pointing at its newest prerelease. Hosts that do
not support symlinks (``build-environment: netlify``) get a copy of the
version directory instead.

Before the pages are converted, ``xref:latest@component:page.adoc`` and
``xref:dev@component:page.adoc`` references are rewritten to the concrete
version numbers so that they resolve during the build.
"""

import logging
import os
import re
import shutil
import stat
import traceback
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple, Optional, Union

import semver

from .common_utils import (
    ASCIIDOC_MEDIA_TYPE,
    DEFAULT_OUTPUT_DIR,
    NAV_FILE_BASENAME,
    SHARED_COMPONENT,
)
from .host import BuildContext, Component, ContentCatalog, ContentFile, Extension

logger = logging.getLogger(__name__)

# Names of the version pointers and of the status file
LATEST_SYMLINK = "latest"
DEV_SYMLINK = "dev"
LATEST_DEV_FILE = "latest_dev.txt"
INDEX_FILE = "index.html"
INDEX_BACKUP_FILE = "index.html.bkp"

BUILD_ENVIRONMENT_ATTRIBUTE = "build-environment"
NETLIFY_ENVIRONMENT = "netlify"

COERCE_REGEX = re.compile(r"(\d+)(?:\.(\d+))?(?:\.(\d+))?")
START_PAGE_VERSION_REGEX = re.compile(r"^([\w.-]+)@")
START_PAGE_COMPONENT_REGEX = re.compile(r"^[\w.-]+@([\w.-]+):")
XREF_REGEX = re.compile(rf"xref:({LATEST_SYMLINK}|{DEV_SYMLINK})@([^:\s\[]+):([^\[\s]+)")


def coerce_version(version_str: Optional[str]) -> Optional[semver.Version]:
    """Coerce a loose version string such as ``v2.4`` or ``1.29`` into a semantic version.

    The first ``major[.minor[.patch]]`` group found in the string is used,
    missing parts default to 0. Returns None when the string holds no number.
    """
    match = COERCE_REGEX.search(str(version_str or ""))
    if not match:
        return None
    major, minor, patch = (int(part or 0) for part in match.groups())
    return semver.Version(major, minor, patch)


def prerelease_tag(version_str: str, marker: Union[str, bool, None] = None) -> Union[str, bool, None]:
    """Return the prerelease marker of a version, or None for a stable version.

    The marker set on the component version wins. Otherwise the prerelease
    part of the version string is used (``1.3.0-rc1`` -> ``rc1``).
    """
    if marker is not None and marker is not False:
        return marker
    try:
        return semver.Version.parse(str(version_str), optional_minor_and_patch=True).prerelease
    except (ValueError, TypeError):
        return None


@dataclass(frozen=True)
class VersionInfo:
    version: str
    semver: semver.Version
    prerelease: Union[str, bool, None] = None


@dataclass(frozen=True)
class ComponentVersionRecord:
    """Newest stable and prerelease versions of a component."""

    component_name: str
    latest_stable: Optional[VersionInfo] = None
    latest_prerelease: Optional[VersionInfo] = None

    def pointers(self) -> list[tuple[str, Optional[VersionInfo]]]:
        return [(LATEST_SYMLINK, self.latest_stable), (DEV_SYMLINK, self.latest_prerelease)]

    def resolve(self, pointer_name: str) -> Optional[str]:
        """Return the concrete version a pointer name stands for, or None."""
        version_info = dict(self.pointers()).get(pointer_name)
        return version_info.version if version_info else None


class StartPageRef(NamedTuple):
    version: Optional[str] = None
    component: Optional[str] = None


class XrefTarget(NamedTuple):
    version_type: str
    component: str
    file: str

    def with_version(self, version: str) -> str:
        return f"xref:{version}@{self.component}:{self.file}"


def parse_start_page(start_page: Optional[str]) -> StartPageRef:
    """Extract version and component from a start page such as ``1.29@admission-controller:en:introduction.adoc``.

    Both fields are matched independently and are None when they cannot be parsed.
    """
    if not start_page:
        return StartPageRef()
    version_match = START_PAGE_VERSION_REGEX.match(start_page)
    component_match = START_PAGE_COMPONENT_REGEX.match(start_page)
    return StartPageRef(
        version=version_match.group(1) if version_match else None,
        component=component_match.group(1) if component_match else None,
    )


def resolve_component_versions(component: Component) -> ComponentVersionRecord:
    """Find the newest stable and the newest prerelease version of a component."""
    parsed_versions = []
    for component_version in component.versions:
        coerced = coerce_version(component_version.version)
        if coerced is None:
            logger.debug(f"Ignoring version '{component_version.version}' of {component.name}")
            continue
        parsed_versions.append(
            VersionInfo(
                version=component_version.version,
                semver=coerced,
                prerelease=prerelease_tag(component_version.version, component_version.prerelease),
            )
        )

    # Latest first
    parsed_versions.sort(key=lambda v: v.semver, reverse=True)

    return ComponentVersionRecord(
        component_name=component.name,
        latest_stable=next((v for v in parsed_versions if v.prerelease is None), None),
        latest_prerelease=next((v for v in parsed_versions if v.prerelease is not None), None),
    )


def format_latest_dev(record: ComponentVersionRecord) -> str:
    """Create the content of the status file of a component."""
    content = f"{record.component_name}\n"
    if record.latest_stable:
        content += f"{LATEST_SYMLINK}: {record.latest_stable.version}\n"
    if record.latest_prerelease:
        content += f"{DEV_SYMLINK}: {record.latest_prerelease.version}\n"
    return content


def write_latest_dev_file(directory: Union[str, Path], content: str) -> bool:
    """Write the status file in ``directory``. Failures are logged, not raised."""
    directory = Path(directory)
    try:
        directory.mkdir(parents=True, exist_ok=True)
        (directory / LATEST_DEV_FILE).write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to write {LATEST_DEV_FILE} in {directory}: {e}")
        return False
    return True


def modify_xrefs_in_text(
    file_text: str, component_versions: list[ComponentVersionRecord], path: Optional[str] = None
) -> tuple[str, int]:
    """Point ``xref:latest@...`` and ``xref:dev@...`` references at concrete versions.

    References to components or pointers without a resolved version are left
    as they are.

    Returns:
        The new text and the number of references that were modified.
    """
    records = {record.component_name: record for record in reversed(component_versions)}
    xrefs_modified = 0

    def _replace(match: re.Match) -> str:
        nonlocal xrefs_modified
        target = XrefTarget(*match.groups())
        logger.debug(f"Found xref '{match.group(0)}' in {path}")
        record = records.get(target.component)
        actual_version = record.resolve(target.version_type) if record else None
        if not actual_version:
            logger.debug(
                f"No replacement version found for {target.version_type} "
                f"in component {target.component}"
            )
            return match.group(0)
        new_xref = target.with_version(actual_version)
        logger.debug(f"Modified xref: {new_xref}")
        xrefs_modified += 1
        return new_xref

    new_file_text = XREF_REGEX.sub(_replace, file_text)
    return new_file_text, xrefs_modified


def is_safe_path(base: Union[str, Path], target: Union[str, Path]) -> bool:
    """Check that ``target`` lies within ``base``."""
    relative = os.path.relpath(target, base)
    return not relative.startswith("..") and not os.path.isabs(relative)


def create_symlink_or_copy(
    target_path: str, link_path: Union[str, Path], build_environment: Optional[str] = None
) -> bool:
    """Create ``link_path`` pointing at ``target_path`` (relative to the link's directory).

    An existing file or symlink at ``link_path`` is replaced. An existing
    directory is left untouched.

    Returns:
        True if the pointer was created.
    """
    link_path = Path(link_path)
    if os.path.lexists(link_path):
        if stat.S_ISDIR(link_path.lstat().st_mode):
            logger.debug(f"Not writing {link_path} because it is a directory")
            return False
        link_path.unlink()

    if build_environment == NETLIFY_ENVIRONMENT:
        logger.debug("Build environment is Netlify, performing recursive copy.")
        shutil.copytree(link_path.parent / target_path, link_path, symlinks=True)
    else:
        logger.debug("Standard build environment, creating symlink.")
        os.symlink(target_path, link_path, target_is_directory=True)
    return True


def publish_pointer(
    output_dir: Union[str, Path],
    component_name: str,
    pointer_name: str,
    version: str,
    build_environment: Optional[str] = None,
) -> bool:
    """Create ``<output_dir>/<component_name>/<pointer_name>`` pointing at ``version``.

    Returns:
        True if the pointer was created, False if it was refused or skipped.
    """
    base = Path(output_dir).resolve()
    dir_name = base / component_name
    link_path = dir_name / pointer_name
    if not is_safe_path(base, link_path):
        logger.warning(f"Refusing to create '{pointer_name}' outside of {output_dir}: {link_path}")
        return False
    target_path = os.path.relpath(dir_name / version, dir_name)
    logger.debug(f"Creating {pointer_name} -> {target_path} for {component_name}")
    return create_symlink_or_copy(target_path, link_path, build_environment)


def update_index_html(output_dir: Union[str, Path], start_page: StartPageRef) -> bool:
    """Point the links of the site landing page at the ``latest`` version of the start component.

    The page is only rewritten when the ``latest`` pointer of the start page
    component exists. A copy of the original is kept next to it and is not
    overwritten by later runs.

    Returns:
        True if the landing page was rewritten.
    """
    output_dir = Path(output_dir)
    index_path = output_dir / INDEX_FILE
    if not index_path.exists():
        logger.debug(f"No {INDEX_FILE} in {output_dir}")
        return False
    if not (start_page.component and start_page.version):
        logger.debug("No start page component and version, leaving index.html untouched")
        return False

    latest_path = output_dir / start_page.component / LATEST_SYMLINK
    if not latest_path.exists():
        logger.debug(f"Skipping {INDEX_FILE} update: '{latest_path}' does not exist.")
        return False

    logger.debug(
        f"Updating {INDEX_FILE}: replacing {start_page.component}/{start_page.version} "
        f"with {start_page.component}/{LATEST_SYMLINK}"
    )
    # Keep the first backup, later runs see an already rewritten page
    backup_path = output_dir / INDEX_BACKUP_FILE
    if not backup_path.exists():
        shutil.copyfile(index_path, backup_path)
        logger.debug(f"Backed up {INDEX_FILE} to {backup_path}")

    version_pattern = re.compile(
        rf"(?<![\w.-])({re.escape(start_page.component)})/{re.escape(start_page.version)}"
        r"(?![\w.-])"
    )
    index_content = index_path.read_text(encoding="utf-8")
    index_content = version_pattern.sub(rf"\1/{LATEST_SYMLINK}", index_content)
    index_path.write_text(index_content, encoding="utf-8")
    return True


@dataclass
class VersionPointerState:
    """State collected across the lifecycle events of one build."""

    output_dir: str = DEFAULT_OUTPUT_DIR
    start_page: StartPageRef = field(default_factory=StartPageRef)
    component_versions: list[ComponentVersionRecord] = field(default_factory=list)

    def find(self, component_name: str) -> Optional[ComponentVersionRecord]:
        return next(
            (r for r in self.component_versions if r.component_name == component_name), None
        )


class VersionsLatestPrerelease(Extension):
    name = "versions-latest-prerelease"

    def __init__(self):
        self.state = VersionPointerState()

    def on_playbook_built(self, context: BuildContext) -> None:
        """Capture the output directory and the start page version and component."""
        playbook = context.playbook
        self.state = VersionPointerState(
            output_dir=playbook.output_dir or DEFAULT_OUTPUT_DIR,
            start_page=parse_start_page(playbook.start_page),
        )
        logger.debug(f"outputDir is {self.state.output_dir}")
        logger.debug(f"Start page version and component: {self.state.start_page}")

    def on_content_classified(self, context: BuildContext) -> None:
        """Resolve the latest versions of every component and rewrite xrefs."""
        catalog = context.content_catalog
        for component in catalog.get_components():
            if component.name == SHARED_COMPONENT:
                continue
            record = resolve_component_versions(component)
            self.state.component_versions.append(record)

            content = format_latest_dev(record)
            logger.debug(f"{component.name}/{LATEST_DEV_FILE} will contain:\n{content}")
            write_latest_dev_file(Path(self.state.output_dir).resolve() / component.name, content)

        self.rewrite_xrefs(catalog)

    def rewrite_xrefs(self, catalog: ContentCatalog) -> int:
        """Rewrite latest/dev xrefs in every AsciiDoc page. Returns the number of files changed."""
        files_modified = 0
        for file in catalog.find_by(media_type=ASCIIDOC_MEDIA_TYPE):
            try:
                if self._rewrite_file_xrefs(file):
                    files_modified += 1
            except Exception:
                logger.error(f"Error processing file {file.src.path}:\n{traceback.format_exc()}")
        return files_modified

    def _rewrite_file_xrefs(self, file: ContentFile) -> bool:
        path = file.src.path
        component_name = file.src.component
        # Skip navigation files, the shared component and files without a path
        if not path or file.src.basename == NAV_FILE_BASENAME or component_name == SHARED_COMPONENT:
            return False
        if not file.contents:
            return False

        logger.debug(f"Scanning for xref:(latest|dev)@ in component: {component_name}, file: {path}")
        new_file_text, xrefs_modified = modify_xrefs_in_text(
            file.contents.decode("utf-8"), self.state.component_versions, path
        )
        if not xrefs_modified:
            return False
        file.contents = new_file_text.encode("utf-8")
        logger.info(f"Modified {xrefs_modified} xref(s) in file: {path} (component: {component_name})")
        return True

    def on_site_published(self, context: BuildContext) -> None:
        """Create the version pointers and point the landing page at ``latest``."""
        build_environment = context.playbook.asciidoc_attributes.get(BUILD_ENVIRONMENT_ATTRIBUTE)
        logger.debug(f"build-environment attribute: {build_environment}")

        for record in self.state.component_versions:
            for pointer_name, version_info in record.pointers():
                if not version_info:
                    continue
                try:
                    publish_pointer(
                        self.state.output_dir,
                        record.component_name,
                        pointer_name,
                        version_info.version,
                        build_environment,
                    )
                except OSError as e:
                    logger.error(
                        f"Failed to create symlink or copy '{pointer_name}' "
                        f"for {record.component_name} {version_info.version}: {e}"
                    )

        update_index_html(self.state.output_dir, self.state.start_page)
