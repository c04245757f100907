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

from docsite_helpers.host import (
    BuildContext,
    Component,
    ComponentVersion,
    ContentCatalog,
    ContentFile,
    ExtensionPipeline,
    NavItem,
    SourceInfo,
)
from docsite_helpers.unpublish_unlisted_pages import UnpublishUnlistedPages, get_nav_entries_by_url


def make_page(component, version, name):
    return ContentFile(
        src=SourceInfo(component=component, version=version, path=f"pages/{name}.adoc", family="page"),
        pub_url=f"/{component}/{version}/en/{name}.html",
        out=f"{component}/{version}/en/{name}.html",
    )


def make_catalog():
    navigation = [
        NavItem(
            content="Guides",
            url_type="fragment",
            items=[
                NavItem(content="Install", url="/widgets/2.4.0/en/install.html#steps", url_type="internal"),
                NavItem(content="Upstream", url="https://example.com", url_type="external"),
            ],
        ),
        NavItem(
            content="Reference",
            url="/widgets/2.4.0/en/reference.html",
            url_type="internal",
            items=[NavItem(content="API", url="/widgets/2.4.0/en/api.html", url_type="internal")],
        ),
    ]
    components = [
        Component(
            name="widgets",
            versions=[
                ComponentVersion(
                    name="widgets",
                    version="2.4.0",
                    url="/widgets/2.4.0/en/index.html",
                    navigation=navigation,
                )
            ],
        ),
        Component(
            name="gadgets",
            versions=[ComponentVersion(name="gadgets", version="1.0", url="/gadgets/1.0/en/index.html")],
        ),
    ]
    files = [
        make_page("widgets", "2.4.0", name)
        for name in ["index", "install", "reference", "api", "hidden"]
    ] + [make_page("gadgets", "1.0", "orphan")]
    return ContentCatalog(components=components, files=files)


def outputs(catalog):
    return {page.pub_url: page.out for page in catalog.files}


def test_get_nav_entries_by_url():
    catalog = make_catalog()
    entries = get_nav_entries_by_url(catalog.components[0].versions[0].navigation)
    assert set(entries) == {
        "/widgets/2.4.0/en/install.html",
        "/widgets/2.4.0/en/reference.html",
        "/widgets/2.4.0/en/api.html",
    }
    assert entries["/widgets/2.4.0/en/api.html"].content == "API"


def test_unlisted_pages_are_unpublished():
    catalog = make_catalog()
    extension = UnpublishUnlistedPages({"component": "widgets"})
    unpublished = extension.on_navigation_built(BuildContext(content_catalog=catalog))

    assert unpublished == 1
    out = outputs(catalog)
    assert out["/widgets/2.4.0/en/hidden.html"] is None
    # The default URL stays published although it is not in the navigation
    assert out["/widgets/2.4.0/en/index.html"] is not None
    assert out["/widgets/2.4.0/en/install.html"] is not None
    assert out["/widgets/2.4.0/en/api.html"] is not None
    # Components that are not configured are left alone
    assert out["/gadgets/1.0/en/orphan.html"] is not None


def test_component_list_config():
    catalog = make_catalog()
    pipeline = ExtensionPipeline([UnpublishUnlistedPages({"component": ["widgets", "gadgets"]})])
    pipeline.notify("navigation_built", BuildContext(content_catalog=catalog))

    out = outputs(catalog)
    assert out["/widgets/2.4.0/en/hidden.html"] is None
    assert out["/gadgets/1.0/en/orphan.html"] is None


def test_disabled_without_component():
    catalog = make_catalog()
    for config in (None, {}, {"component": []}):
        extension = UnpublishUnlistedPages(config)
        assert not extension.enabled
        assert extension.on_navigation_built(BuildContext(content_catalog=catalog)) == 0
    assert all(out is not None for out in outputs(catalog).values())
