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
"""Common utilities shared across the documentation site helpers."""

import logging
import os

# Set up logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger("docsite_helpers")

# Constants
DEFAULT_OUTPUT_DIR = "build/site"
SHARED_COMPONENT = "shared"
NOT_FOUND_LAYOUT = "404"
ASCIIDOC_MEDIA_TYPE = "text/asciidoc"
NAV_FILE_BASENAME = "nav.adoc"
DEBUG_ENV_VAR = "VLP_DEBUG"


def debug_enabled() -> bool:
    """Return True when diagnostic logging was requested through the environment."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() == "true"


def set_debug(enabled: bool = True) -> None:
    """Raise (or reset) the package logger level for diagnostic output."""
    logger.setLevel(logging.DEBUG if enabled else logging.NOTSET)


def get_field(obj, name: str, default=None):
    """Read ``name`` from a mapping or an object attribute.

    Template engines hand helpers either plain dicts or model objects, so the
    helpers accept both.
    """
    if obj is None:
        return default
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def is_not_found_page(nav) -> bool:
    """Check whether the navigation context describes the 404 page."""
    page = get_field(nav, "page")
    return get_field(page, "layout") == NOT_FOUND_LAYOUT


if debug_enabled():
    set_debug()
