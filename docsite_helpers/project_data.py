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
"""Project metadata lookup for the site header templates."""

import json
import logging
from pathlib import Path
from typing import Optional

import jsonschema
import yaml
from jsonschema import Draft4Validator

from .common_utils import get_field, is_not_found_page
from .url_fields import component as get_project_code

logger = logging.getLogger(__name__)

PROJECT_DATA_SCHEMA = Path(__file__).parent / "schemas" / "project-data.schema.json"


class ProjectDataError(ValueError):
    """Raised when a project data file cannot be read or does not match the schema."""


def proj_data(request: str, nav, project_data: Optional[list]) -> Optional[str]:
    """Look up a field of the project the current page belongs to.

    The project is the record whose ``url-part`` equals the first segment of
    the page URL. ``request`` is one of ``title``, ``url`` or ``fullTitle``.
    """
    if is_not_found_page(nav):
        return None

    project_code = get_project_code(get_field(get_field(nav, "page"), "url"))
    if not project_code:
        return None

    project = next(
        (obj for obj in project_data or [] if obj.get("url-part") == project_code), None
    )
    if not project:
        logger.debug(f"No project data for '{project_code}'")
        return None

    if request == "title":
        return project.get("title") or None
    if request == "url":
        return project.get("url") or None
    if request == "fullTitle":
        return project.get("fullTitle") or project.get("title") or None
    return None


def validate_project_data(data) -> tuple[bool, object]:
    """Validate project data against the bundled schema.

    Returns a tuple of (is_valid, message or validation error).
    """
    with PROJECT_DATA_SCHEMA.open("r") as file:
        schema = json.load(file)
    validator = Draft4Validator(schema)

    try:
        validator.validate(data)
    except jsonschema.exceptions.ValidationError as err:
        return False, err

    return True, "valid"


def load_project_data(path) -> list:
    """Read a JSON or YAML project data file and validate it."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as file:
            if path.suffix in (".yml", ".yaml"):
                data = yaml.safe_load(file)
            else:
                data = json.load(file)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ProjectDataError(f"Failed to read project data {path}: {e}") from e

    is_valid, msg = validate_project_data(data)
    if not is_valid:
        raise ProjectDataError(f"Invalid project data {path}: {msg.message}")
    logger.info(f"Loaded {len(data)} project(s) from {path}")
    return data
