"""
Rekompenco test suite.

Tests are organized by layer:
    tests/unit/         Unit tests (tmp_path files only, fast)
    tests/integration/  CLI tests through click's CliRunner

Run all tests:
    pytest

Run unit tests only:
    pytest tests/unit/
"""
