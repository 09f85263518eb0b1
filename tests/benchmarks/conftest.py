"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-member flat, 100-member nested, 500-member deeply nested.
Each tier provides both "similar" and "dissimilar" pair generators.

Documents mix objects and arrays so both child matchers are exercised at
every level.
"""

from __future__ import annotations

from typing import Any

import pytest


def _make_similar_flat(num_keys: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a flat similar pair: one renamed key, one edited value."""
    left = {f"field_{i}": f"value_{i}" for i in range(num_keys)}
    right = dict(left)
    right["renamed"] = right.pop("field_0")
    right["field_1"] = "value_one"
    return left, right


def _make_dissimilar_flat(num_keys: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a flat dissimilar pair (no shared keys or values)."""
    left = {f"user_field_{i}": f"user_value_{i}" for i in range(num_keys)}
    right = {f"product_attr_{i}": f"product_data_{i}" for i in range(num_keys)}
    return left, right


def _make_similar_nested_100() -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a 100-member nested similar pair.

    Structure: 10 sections x (8 leaf members + one 2-element array).
    The right side swaps the array elements of every other section.
    """
    left: dict[str, Any] = {}
    right: dict[str, Any] = {}
    for i in range(10):
        sub_l: dict[str, Any] = {f"field_{i}_{j}": f"value_{i}_{j}" for j in range(8)}
        sub_r: dict[str, Any] = dict(sub_l)
        sub_l["tags"] = [f"tag_{i}_a", f"tag_{i}_b"]
        sub_r["tags"] = sub_l["tags"][::-1] if i % 2 else list(sub_l["tags"])
        left[f"section_{i}"] = sub_l
        right[f"section_{i}"] = sub_r
    return left, right


def _make_dissimilar_nested_100() -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a 100-member nested dissimilar pair (user vs product domains)."""
    left: dict[str, Any] = {}
    right: dict[str, Any] = {}
    for i in range(10):
        left[f"user_section_{i}"] = {
            f"user_field_{i}_{j}": f"user_val_{i}_{j}" for j in range(9)
        }
        right[f"product_section_{i}"] = [f"prod_val_{i}_{j}" for j in range(9)]
    return left, right


def _make_similar_nested_500() -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a 500-member deeply nested similar pair.

    Structure: 5 sections x 5 groups x (8 leaf members + a 6-item record list).
    """
    left: dict[str, Any] = {}
    right: dict[str, Any] = {}
    for i in range(5):
        mid_l: dict[str, Any] = {}
        mid_r: dict[str, Any] = {}
        for j in range(5):
            leaf_l: dict[str, Any] = {
                f"field_{i}_{j}_{k}": f"value_{i}_{j}_{k}" for k in range(8)
            }
            leaf_r: dict[str, Any] = dict(leaf_l)
            records = [{"id": k, "name": f"item_{i}_{j}_{k}"} for k in range(6)]
            leaf_l["records"] = records
            leaf_r["records"] = records[1:] + records[:1]
            leaf_r[f"field_{i}_{j}_0"] = f"changed_{i}_{j}"
            mid_l[f"group_{j}"] = leaf_l
            mid_r[f"group_{j}"] = leaf_r
        left[f"section_{i}"] = mid_l
        right[f"section_{i}"] = mid_r
    return left, right


def _make_dissimilar_nested_500() -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a 500-member deeply nested dissimilar pair."""
    left: dict[str, Any] = {}
    right: dict[str, Any] = {}
    for i in range(5):
        mid_l: dict[str, Any] = {}
        mid_r: dict[str, Any] = {}
        for j in range(5):
            mid_l[f"user_group_{j}"] = {
                f"user_field_{i}_{j}_{k}": f"u_val_{i}_{j}_{k}" for k in range(14)
            }
            mid_r[f"product_group_{j}"] = [
                {"attr": k, "value": f"p_val_{i}_{j}_{k}"} for k in range(14)
            ]
        left[f"user_section_{i}"] = mid_l
        right[f"product_section_{i}"] = mid_r
    return left, right


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10key_similar() -> tuple[dict[str, Any], dict[str, Any]]:
    """10-member flat similar pair."""
    return _make_similar_flat(10)


@pytest.fixture
def pair_10key_dissimilar() -> tuple[dict[str, Any], dict[str, Any]]:
    """10-member flat dissimilar pair."""
    return _make_dissimilar_flat(10)


@pytest.fixture
def pair_100key_similar() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-member nested similar pair."""
    return _make_similar_nested_100()


@pytest.fixture
def pair_100key_dissimilar() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-member nested dissimilar pair."""
    return _make_dissimilar_nested_100()


@pytest.fixture
def pair_500key_similar() -> tuple[dict[str, Any], dict[str, Any]]:
    """500-member deeply nested similar pair."""
    return _make_similar_nested_500()


@pytest.fixture
def pair_500key_dissimilar() -> tuple[dict[str, Any], dict[str, Any]]:
    """500-member deeply nested dissimilar pair."""
    return _make_dissimilar_nested_500()
