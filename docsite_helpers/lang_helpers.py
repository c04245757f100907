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
"""Template helpers for multilingual pages.

These are called by the UI templates once per rendered page to build the
``<link rel="alternate" hreflang=...>`` tags and the header language switch.
"""

import logging
import re
from typing import Iterable, Optional, Union

from .common_utils import is_not_found_page
from .url_fields import PageUrl

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

# URL language segment -> IETF hreflang tag
HREFLANG_MAPPING = {
    "en": "en-US",
    "de": "de-DE",
    "fr": "fr-FR",
    "es": "es-ES",
    "ja": "ja-JP",
    "pt_br": "pt-BR",
    "zh": "zh-CN",
    "ko": "ko-KR",
}

LANG_FORM_HREFLANG = "hreflang"
LANG_FORM_HEADERLANG = "headerlang"


def href_lang(page_url: Optional[str], lang: str, nav) -> Optional[str]:
    """Build the URL of the ``lang`` variant of ``page_url``.

    Returns None on the 404 page, or when the URL carries no component or
    version to rebuild the alternate from, instead of rendering the missing
    segments literally. A missing remainder gives an empty tail
    (``/widgets/2.4.0/de/``).
    """
    if is_not_found_page(nav):
        return None

    fields = PageUrl.parse(page_url)
    if fields.is_malformed:
        logger.debug(f"Cannot build hreflang URL from '{page_url}'")
        return None

    return f"/{fields.component}/{fields.version}/{lang}/{fields.remainder or ''}"


def _parse_languages(languages: Union[str, Iterable[str]]) -> list[str]:
    if isinstance(languages, str):
        return re.sub(r"[\[\]\s]", "", languages).lower().split(",")
    return [str(lang).strip().lower() for lang in languages]


def lang_exists_for(
    lang: str, url: Optional[str], languages: Union[str, Iterable[str], None], this_page_lang: str
) -> bool:
    """Decide whether an hreflang alternate for ``lang`` should be emitted.

    ``languages`` is the list of translations available for the page, usually
    written in the page attributes as ``[de, fr]``.
    """
    logger.debug(f"Checking for {lang} in {languages} for {url}")
    if not languages:
        logger.debug("No languages.")
        return False
    if this_page_lang == lang:
        return False
    result = lang.lower() in _parse_languages(languages)
    logger.debug(f"Returning result = {result}")
    return result


def lang_from_url(page_url: Optional[str], form: str, nav) -> Optional[str]:
    """Return the page language in the requested form.

    ``form`` is ``"hreflang"`` for the IETF tag, ``"headerlang"`` for the
    header language switch code, anything else for the raw URL segment.
    """
    if is_not_found_page(nav):
        return None

    lang = PageUrl.parse(page_url).language or DEFAULT_LANGUAGE
    if form == LANG_FORM_HREFLANG:
        return HREFLANG_MAPPING.get(lang)
    if form == LANG_FORM_HEADERLANG:
        return "zh_cn" if lang.lower() == "zh" else lang
    return lang
