"""Tests for the Local Library catalog."""
