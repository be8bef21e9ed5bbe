#!/usr/bin/env python3

import click

from json_to_php import __version__
from json_to_php.cli_utils import generation_comment, reconstruct_command_line
from json_to_php.json_to_php import json_to_php


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Without an active Click context only the command name is returned"""
        assert reconstruct_command_line(json_to_php) == "json_to_php"

    def test_reconstruct_command_line_with_context(self):
        ctx = json_to_php.make_context(
            "json_to_php",
            ["--name", "user", "-v", "/data/in/user.json", "/data/out/User.php"],
        )
        with ctx:
            assert reconstruct_command_line(json_to_php) == "json_to_php user.json User.php --name user --verbose"

    def test_defaults_are_skipped(self):
        ctx = json_to_php.make_context("json_to_php", ["in.json", "out.php"])
        with ctx:
            assert reconstruct_command_line(json_to_php) == "json_to_php in.json out.php"

    def test_generation_comment(self):
        assert generation_comment() == f"Generated by json_to_php {__version__}: json_to_php"

    def test_generation_comment_other_command(self):
        @click.command()
        @click.argument("path")
        def other(path):
            pass

        with other.make_context("other", ["/tmp/x.json"]):
            assert generation_comment(other).endswith(": json_to_php x.json")
