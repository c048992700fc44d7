"""
Tests for flowpath.

This package contains tests for:
- Curve segments and path building
- Edge routers (straight, step, bezier, spline, offset, custom)
- Edge assembly, arrow placement and tube meshes
- Diagram routing and the command-line interface
"""
