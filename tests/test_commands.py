"""Tests for positional-argument parsing (core/commands.py).

Pure tests — no I/O, no fakes.
"""

from __future__ import annotations

import pytest

from devhub.core.commands import USAGE, parse_command
from devhub.core.models import (
    CreateProduct,
    DeleteProduct,
    ListProducts,
    UpdateProduct,
)
from devhub.exceptions import UsageError


class TestWellFormed:
    def test_list(self) -> None:
        assert parse_command(["list"]) == ListProducts()

    def test_create_without_name(self) -> None:
        assert parse_command(["create"]) == CreateProduct(name=None)

    def test_create_carries_name_option(self) -> None:
        assert parse_command(["create"], name="widget") == CreateProduct(name="widget")

    def test_delete(self) -> None:
        assert parse_command(["delete", "widget"]) == DeleteProduct(name="widget")

    def test_update(self) -> None:
        assert parse_command(["update", "widget", "name", "new-widget"]) == UpdateProduct(
            product="widget", key="name", value="new-widget",
        )

    def test_name_option_ignored_outside_create(self) -> None:
        assert parse_command(["list"], name="widget") == ListProducts()


class TestMalformed:
    @pytest.mark.parametrize(
        "args",
        [
            [],
            ["show"],
            ["LIST"],
            ["list", "extra"],
            ["create", "widget"],
            ["delete"],
            ["delete", "a", "b"],
            ["update", "widget", "name"],
            ["update", "widget", "name", "x", "y"],
        ],
    )
    def test_rejected_with_usage(self, args: list[str]) -> None:
        with pytest.raises(UsageError) as exc_info:
            parse_command(args)
        assert exc_info.value.hint == USAGE

    def test_usage_lists_every_verb(self) -> None:
        for verb in ("list", "create", "delete", "update"):
            assert f"devhub product {verb}" in USAGE
