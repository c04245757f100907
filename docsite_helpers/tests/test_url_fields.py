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

import unittest

from docsite_helpers import url_fields
from docsite_helpers.url_fields import PageUrl


class TestUrlFields(unittest.TestCase):
    def test_fields_of_well_formed_url(self):
        url = "/widgets/2.4.0/en/guides/install.html"
        self.assertEqual(url_fields.component(url), "widgets")
        self.assertEqual(url_fields.version(url), "2.4.0")
        self.assertEqual(url_fields.language(url), "en")
        self.assertEqual(url_fields.remainder(url), "guides/install.html")

    def test_missing_remainder_is_none(self):
        self.assertIsNone(url_fields.remainder("/widgets/2.4.0"))
        self.assertIsNone(url_fields.language("/widgets/2.4.0"))
        self.assertIsNone(url_fields.remainder("/widgets/2.4.0/en/"))

    def test_empty_and_none_urls(self):
        for url in (None, "", "/"):
            fields = PageUrl.parse(url)
            self.assertEqual(fields, PageUrl())
            self.assertTrue(fields.is_malformed)

    def test_empty_segments_are_none(self):
        fields = PageUrl.parse("//2.4.0/en/index.html")
        self.assertIsNone(fields.component)
        self.assertEqual(fields.version, "2.4.0")
        self.assertTrue(fields.is_malformed)

    def test_parse_bundles_all_fields(self):
        fields = PageUrl.parse("/gadgets/1.0/de/a/b/c.html")
        self.assertEqual(fields, PageUrl("gadgets", "1.0", "de", "a/b/c.html"))
        self.assertFalse(fields.is_malformed)


if __name__ == "__main__":
    unittest.main()
