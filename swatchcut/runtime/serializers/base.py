# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from enum import Enum


class SerializerFormat(Enum):
    """Output format for JSON serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"


def role_slug(value: str) -> str:
    """Turn a role value like ``light_vibrant`` into ``light-vibrant``."""
    return value.replace("_", "-")
