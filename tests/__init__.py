"""
Test suite for PyFastNoise package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for permutation tables, configurations, kernels and fractals
- Integration tests for complete sampling/export workflows

Run with: pytest
"""
