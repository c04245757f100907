#!/usr/bin/env python3
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
"""Command line entry point for post-build steps of the documentation site."""

import argparse
import os
import sys
from typing import List, Optional

import yaml

from .common_utils import DEFAULT_OUTPUT_DIR, logger, set_debug
from .host import BuildContext, ContentCatalog, ExtensionPipeline, Playbook
from .project_data import ProjectDataError, load_project_data
from .versions_latest_prerelease import BUILD_ENVIRONMENT_ATTRIBUTE, VersionsLatestPrerelease


class DocsiteCLI:
    """Command-line interface for the documentation site helpers"""

    def __init__(self):
        self.script_name = os.environ.get("DOCSITE_CMD_NAME", "docsite-helpers")
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser with all supported commands"""
        parser = argparse.ArgumentParser(
            prog=self.script_name,
            description=f"{self.script_name} post-build tools for multi-version documentation sites",
        )
        parser.add_argument("--debug", action="store_true", help="Enable diagnostic logging")
        subparsers = parser.add_subparsers(dest="command", required=True)

        publish = subparsers.add_parser(
            "publish",
            help="Write latest/dev status files and pointers into a built site",
        )
        publish.add_argument(
            "--components",
            required=True,
            help="JSON file listing the components and their versions",
        )
        publish.add_argument("--playbook", help="YAML playbook of the site build")
        publish.add_argument("--output-dir", help="Site output directory (overrides the playbook)")
        publish.add_argument("--start-page", help="Site start page (overrides the playbook)")
        publish.add_argument(
            "--build-environment",
            help="Build environment, 'netlify' copies version directories instead of symlinking",
        )
        publish.set_defaults(func=self.handle_publish)

        validate = subparsers.add_parser(
            "validate-project-data", help="Validate a project data file against its schema"
        )
        validate.add_argument("path", help="JSON or YAML project data file")
        validate.set_defaults(func=self.handle_validate_project_data)

        return parser

    def handle_publish(self, args: argparse.Namespace) -> int:
        """Run the version pointer extension against an already built site"""
        try:
            playbook = Playbook.load(args.playbook) if args.playbook else Playbook()
            catalog = ContentCatalog.load(args.components)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load build inputs: {e}")
            return 1

        if args.output_dir:
            playbook.output_dir = args.output_dir
        if args.start_page:
            playbook.start_page = args.start_page
        if args.build_environment:
            playbook.asciidoc_attributes[BUILD_ENVIRONMENT_ATTRIBUTE] = args.build_environment

        pipeline = ExtensionPipeline([VersionsLatestPrerelease()])
        pipeline.run(BuildContext(playbook=playbook, content_catalog=catalog))
        logger.info(f"Published version pointers in {playbook.output_dir or DEFAULT_OUTPUT_DIR}")
        return 0

    def handle_validate_project_data(self, args: argparse.Namespace) -> int:
        try:
            load_project_data(args.path)
        except ProjectDataError as e:
            logger.error(str(e))
            return 1
        print(args.path + ": valid")
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main entry point for the CLI"""
        args = self.parser.parse_args(argv)
        if args.debug:
            set_debug()
        return args.func(args)


def main():
    cli = DocsiteCLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
