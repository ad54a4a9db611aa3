"""
Top-level package for the Exercise Tracker API.

This file makes ``exercise_tracker`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``exercise_tracker.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
