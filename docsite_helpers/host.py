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
"""Model of the site generator the extensions plug into.

The generator owns the playbook, the content catalog and the navigation
tree. These dataclasses carry the parts the extensions read or mutate, and
``ExtensionPipeline`` fires the build lifecycle events in order.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import jsonschema
import yaml
from jsonschema import Draft4Validator

logger = logging.getLogger(__name__)

COMPONENTS_SCHEMA = Path(__file__).parent / "schemas" / "components.schema.json"

# Lifecycle events, in the order the generator fires them
PLAYBOOK_BUILT = "playbook_built"
CONTENT_CLASSIFIED = "content_classified"
NAVIGATION_BUILT = "navigation_built"
SITE_PUBLISHED = "site_published"
LIFECYCLE_EVENTS = (PLAYBOOK_BUILT, CONTENT_CLASSIFIED, NAVIGATION_BUILT, SITE_PUBLISHED)


@dataclass
class Playbook:
    """Build configuration: output location, start page and AsciiDoc attributes."""

    output_dir: Optional[str] = None
    start_page: Optional[str] = None
    asciidoc_attributes: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Playbook":
        """Create a playbook from the structure of a YAML playbook file."""
        data = data or {}
        attributes = (data.get("asciidoc") or {}).get("attributes") or {}
        return cls(
            output_dir=(data.get("output") or {}).get("dir"),
            start_page=(data.get("site") or {}).get("start_page"),
            asciidoc_attributes=dict(attributes),
        )

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Playbook":
        with Path(path).open("r", encoding="utf-8") as file:
            return cls.from_dict(yaml.safe_load(file))


@dataclass
class NavItem:
    """Entry of a component version navigation tree."""

    content: Optional[str] = None
    url: Optional[str] = None
    url_type: Optional[str] = None
    items: list["NavItem"] = field(default_factory=list)


@dataclass
class ComponentVersion:
    name: str
    version: str
    prerelease: Union[str, bool, None] = None
    url: Optional[str] = None
    navigation: list[NavItem] = field(default_factory=list)


@dataclass
class Component:
    name: str
    versions: list[ComponentVersion] = field(default_factory=list)


@dataclass
class SourceInfo:
    component: Optional[str] = None
    version: Optional[str] = None
    path: Optional[str] = None
    basename: Optional[str] = None
    family: Optional[str] = None
    media_type: Optional[str] = None


@dataclass
class ContentFile:
    """A file of the content catalog.

    ``out`` holds the output path and is None when the file is not published.
    """

    src: SourceInfo
    contents: bytes = b""
    pub_url: Optional[str] = None
    out: Optional[str] = None


class ContentCatalog:
    """Components and files discovered by the generator."""

    def __init__(self, components: Optional[list] = None, files: Optional[list] = None):
        self.components: list[Component] = list(components or [])
        self.files: list[ContentFile] = list(files or [])

    def get_components(self) -> list[Component]:
        return self.components

    def find_by(self, **criteria) -> list[ContentFile]:
        """Return the files whose source info matches every given criterion."""
        return [
            file
            for file in self.files
            if all(getattr(file.src, key, None) == value for key, value in criteria.items())
        ]

    @classmethod
    def from_dict(cls, data: dict) -> "ContentCatalog":
        """Create a catalog holding the components of a component list document.

        Raises:
            ValueError: If the document does not match the component list schema.
        """
        with COMPONENTS_SCHEMA.open("r") as file:
            schema = json.load(file)
        try:
            Draft4Validator(schema).validate(data)
        except jsonschema.exceptions.ValidationError as err:
            raise ValueError(f"Invalid component list: {err.message}") from err

        components = []
        for entry in data["components"]:
            versions = [
                ComponentVersion(
                    name=entry["name"],
                    version=version["version"],
                    prerelease=version.get("prerelease"),
                    url=version.get("url"),
                )
                for version in entry.get("versions", [])
            ]
            components.append(Component(name=entry["name"], versions=versions))
        return cls(components=components)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ContentCatalog":
        with Path(path).open("r", encoding="utf-8") as file:
            return cls.from_dict(json.load(file))


@dataclass
class PageContext:
    layout: Optional[str] = None
    url: Optional[str] = None


@dataclass
class NavContext:
    """Template rendering context handed to the template helpers."""

    page: PageContext = field(default_factory=PageContext)


@dataclass
class BuildContext:
    """Objects the generator exposes to the extensions during a build."""

    playbook: Playbook = field(default_factory=Playbook)
    content_catalog: ContentCatalog = field(default_factory=ContentCatalog)


class Extension:
    """Base class for build extensions. Override the handlers you need."""

    name = "extension"

    def on_playbook_built(self, context: BuildContext) -> Any:
        pass

    def on_content_classified(self, context: BuildContext) -> Any:
        pass

    def on_navigation_built(self, context: BuildContext) -> Any:
        pass

    def on_site_published(self, context: BuildContext) -> Any:
        pass


class ExtensionPipeline:
    """Ordered list of extensions notified of each lifecycle event."""

    def __init__(self, extensions: Optional[list] = None):
        self.extensions: list[Extension] = []
        for extension in extensions or []:
            self.register(extension)

    def register(self, extension: Extension) -> Extension:
        if not isinstance(extension, Extension):
            raise TypeError(f"Not an extension: {extension!r}")
        self.extensions.append(extension)
        return extension

    def notify(self, event: str, context: BuildContext) -> None:
        """Invoke the ``event`` handler of every registered extension, in order."""
        if event not in LIFECYCLE_EVENTS:
            raise ValueError(f"Unknown lifecycle event: {event}")
        for extension in self.extensions:
            logger.debug(f"Notifying {extension.name} of {event}")
            getattr(extension, f"on_{event}")(context)

    def run(self, context: BuildContext, events=LIFECYCLE_EVENTS) -> None:
        for event in events:
            self.notify(event, context)
