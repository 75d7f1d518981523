"""Test suite package marker."""

import pytest

# Ensure shared helper modules are assertion-rewritten before import.
pytest.register_assert_rewrite("tests.assertions")
pytest.register_assert_rewrite("tests.release_tree_test_utils")
