"""Tests for cssmatrix."""
