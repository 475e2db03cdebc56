"""
Test suite for docpager.

This package contains all unit tests for the docpager package.
"""
