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
"""Build helpers for multi-component, multi-version documentation sites."""

# Import common helpers to make them available through the package
from ._version import __version__
from .common_utils import logger
from .host import (
    BuildContext,
    Component,
    ComponentVersion,
    ContentCatalog,
    ContentFile,
    Extension,
    ExtensionPipeline,
    NavContext,
    NavItem,
    PageContext,
    Playbook,
    SourceInfo,
)
from .lang_helpers import HREFLANG_MAPPING, href_lang, lang_exists_for, lang_from_url
from .project_data import ProjectDataError, load_project_data, proj_data
from .unpublish_unlisted_pages import UnpublishUnlistedPages
from .url_fields import PageUrl
from .versions_latest_prerelease import VersionsLatestPrerelease

# Names under which the UI templates call the helpers
TEMPLATE_HELPERS = {
    "hrefLang": href_lang,
    "langExistsFor": lang_exists_for,
    "langFromUrl": lang_from_url,
    "projData": proj_data,
}
