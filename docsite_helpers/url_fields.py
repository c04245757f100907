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
"""Positional fields of a published page URL.

Site URLs follow ``/<component>/<version>/<language>/<remainder...>``. The
first segment is always empty because the URLs are absolute.
"""

from dataclasses import dataclass
from typing import Optional


def _segments(url: Optional[str]) -> list[str]:
    return url.split("/") if url else []


def _segment(url: Optional[str], index: int) -> Optional[str]:
    parts = _segments(url)
    if index < len(parts) and parts[index]:
        return parts[index]
    return None


def component(url: Optional[str]) -> Optional[str]:
    """Return the component segment of ``url`` or None."""
    return _segment(url, 1)


def version(url: Optional[str]) -> Optional[str]:
    """Return the version segment of ``url`` or None."""
    return _segment(url, 2)


def language(url: Optional[str]) -> Optional[str]:
    """Return the language segment of ``url`` or None."""
    return _segment(url, 3)


def remainder(url: Optional[str]) -> Optional[str]:
    """Return everything after the language segment, joined with ``/``, or None."""
    return "/".join(_segments(url)[4:]) or None


@dataclass(frozen=True)
class PageUrl:
    """Parsed page URL. Absent or empty segments are None."""

    component: Optional[str] = None
    version: Optional[str] = None
    language: Optional[str] = None
    remainder: Optional[str] = None

    @classmethod
    def parse(cls, url: Optional[str]) -> "PageUrl":
        return cls(
            component=component(url),
            version=version(url),
            language=language(url),
            remainder=remainder(url),
        )

    @property
    def is_malformed(self) -> bool:
        return self.component is None or self.version is None
