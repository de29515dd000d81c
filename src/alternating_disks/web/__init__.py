"""JSON web API for the disk sorting algorithms.

This package provides a Flask application that runs the sorting
algorithms over HTTP.  It is an **optional** extra — install with::

    pip install alternating-disks[web]

The ``create_app`` factory in ``app.py`` serves three endpoints:

- ``GET /api/algorithms`` — names of the registered algorithms.
- ``POST /api/sort`` — sort one alternating row and return JSON.
- ``GET /api/compare`` — run every algorithm on the same row size.
"""
