"""Tests for hassrest."""
