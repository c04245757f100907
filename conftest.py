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

import pytest

from docsite_helpers.common_utils import set_debug
from docsite_helpers.host import (
    BuildContext,
    Component,
    ComponentVersion,
    ContentCatalog,
    ContentFile,
    Playbook,
    SourceInfo,
)


@pytest.fixture(autouse=True)
def reset_debug_logging():
    """Restore the package log level after tests that enable debug output."""
    yield
    set_debug(False)


@pytest.fixture
def site_dir(tmp_path):
    """A published site with two components and their version directories."""
    output_dir = tmp_path / "site"
    for component, versions in {
        "widgets": ["2.3.0", "2.4.0", "2.5.0-rc1"],
        "gadgets": ["1.0"],
    }.items():
        for version in versions:
            version_dir = output_dir / component / version / "en"
            version_dir.mkdir(parents=True)
            (version_dir / "index.html").write_text(f"<h1>{component} {version}</h1>")
    (output_dir / "index.html").write_text(
        '<meta http-equiv="refresh" content="0; url=widgets/2.4.0/en/index.html">\n'
        '<a href="widgets/2.4.0/en/index.html">widgets/2.4.0</a>\n'
    )
    return output_dir


@pytest.fixture
def component_factory():
    def _factory(name, versions, prereleases=()):
        return Component(
            name=name,
            versions=[
                ComponentVersion(
                    name=name,
                    version=version,
                    prerelease="-beta" if version in prereleases else None,
                    url=f"/{name}/{version}/en/index.html",
                )
                for version in versions
            ],
        )

    return _factory


@pytest.fixture
def asciidoc_file():
    def _factory(component, version, path, text, basename=None):
        return ContentFile(
            src=SourceInfo(
                component=component,
                version=version,
                path=path,
                basename=basename or path.rsplit("/", 1)[-1],
                family="page",
                media_type="text/asciidoc",
            ),
            contents=text.encode("utf-8"),
            pub_url=f"/{component}/{version}/en/{path.rsplit('/', 1)[-1].replace('.adoc', '.html')}",
            out=path,
        )

    return _factory


@pytest.fixture
def build_context(site_dir, component_factory):
    """Build context for the site of ``site_dir`` with a start page in widgets 2.4.0."""
    playbook = Playbook(
        output_dir=str(site_dir),
        start_page="2.4.0@widgets:en:index.adoc",
    )
    catalog = ContentCatalog(
        components=[
            component_factory("widgets", ["2.3.0", "2.5.0-rc1", "2.4.0"]),
            component_factory("gadgets", ["1.0"]),
            component_factory("shared", ["~"]),
        ]
    )
    return BuildContext(playbook=playbook, content_catalog=catalog)
