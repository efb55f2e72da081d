"""Tests package."""

