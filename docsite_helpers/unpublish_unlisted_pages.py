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
"""Remove pages that are not listed in the navigation from the published site.

Only components named in the extension configuration are processed, e.g.::

    UnpublishUnlistedPages({"component": ["widgets", "gadgets"]})
"""

import logging
from typing import Optional

from .host import BuildContext, Extension, NavItem

logger = logging.getLogger(__name__)


def get_nav_entries_by_url(items: Optional[list[NavItem]] = None, accum: Optional[dict] = None) -> dict:
    """Flatten a navigation tree into a map of internal URL (without fragment) to entry."""
    if accum is None:
        accum = {}
    for item in items or []:
        if item.url_type == "internal" and item.url:
            accum[item.url.split("#")[0]] = item
        get_nav_entries_by_url(item.items, accum)
    return accum


class UnpublishUnlistedPages(Extension):
    name = "unpublish-unlisted-pages"

    def __init__(self, config: Optional[dict] = None):
        target_components = (config or {}).get("component")
        if target_components and not isinstance(target_components, (list, tuple)):
            target_components = [target_components]
        self.target_components = list(target_components or [])

    @property
    def enabled(self) -> bool:
        return bool(self.target_components)

    def on_navigation_built(self, context: BuildContext) -> int:
        """Clear the output of unlisted pages. Returns the number of pages unpublished."""
        if not self.enabled:
            return 0

        catalog = context.content_catalog
        unpublished = 0
        for component in catalog.get_components():
            for component_version in component.versions:
                if component_version.name not in self.target_components:
                    continue
                nav_entries_by_url = get_nav_entries_by_url(component_version.navigation)
                default_url = component_version.url
                pages = catalog.find_by(
                    component=component_version.name,
                    version=component_version.version,
                    family="page",
                )
                unlisted_pages = [
                    page
                    for page in pages
                    if page.out
                    and page.pub_url not in nav_entries_by_url
                    and page.pub_url != default_url
                ]
                for page in unlisted_pages:
                    logger.debug(f"Unpublishing unlisted page {page.pub_url}")
                    page.out = None
                if unlisted_pages:
                    logger.info(
                        f"Unpublished {len(unlisted_pages)} unlisted page(s) in "
                        f"{component_version.name} {component_version.version}"
                    )
                unpublished += len(unlisted_pages)
        return unpublished
