"""Tests for xportify.exports.classifier."""

from __future__ import annotations

import pytest

from xportify.exports.classifier import classify, is_module_path, strip_module_extension


@pytest.mark.parametrize("module_path", ["index.ts", "index.tsx"])
def test_root_index_maps_to_package_root(module_path: str) -> None:
    result = classify(module_path)
    assert result.is_index is True
    assert result.public_subpath == "."


@pytest.mark.parametrize(
    ("module_path", "expected"),
    [
        ("components/Button/index.tsx", "./components/Button"),
        ("types/index.ts", "./types"),
        ("features/auth/components/LoginForm/index.tsx", "./features/auth/components/LoginForm"),
    ],
)
def test_directory_index_strips_index_suffix(module_path: str, expected: str) -> None:
    result = classify(module_path)
    assert result.is_index is True
    assert result.public_subpath == expected


@pytest.mark.parametrize(
    ("module_path", "expected"),
    [
        ("utils/helper.ts", "./utils/helper"),
        ("components/Button.tsx", "./components/Button"),
        ("utils/@special-file.ts", "./utils/@special-file"),
    ],
)
def test_regular_module_keeps_basename(module_path: str, expected: str) -> None:
    result = classify(module_path)
    assert result.is_index is False
    assert result.public_subpath == expected


def test_root_level_regular_module_has_single_dot_prefix() -> None:
    assert classify("config.ts").public_subpath == "./config"
    assert classify("config.tsx").public_subpath == "./config"


def test_index_prefix_is_not_an_index() -> None:
    result = classify("lib/indexer.ts")
    assert result.is_index is False
    assert result.public_subpath == "./lib/indexer"


def test_unrecognized_extension_is_rejected() -> None:
    assert is_module_path("README.md") is False
    assert is_module_path("config.json") is False
    assert is_module_path("components/Button.tsx") is True
    with pytest.raises(ValueError):
        classify("README.md")


def test_strip_module_extension_handles_both_suffixes() -> None:
    assert strip_module_extension("a/b.ts") == "a/b"
    assert strip_module_extension("a/b.tsx") == "a/b"
