"""Test package for goban.

This package contains all test modules organized by test type:
- components/: Engine tests (locations, groups, board rules, labels)
- unit/: SGF reading, replay and command line tests
- e2e/: End-to-end tests from an SGF file to the printed board
"""
