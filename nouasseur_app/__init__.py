"""
Nouasseur community application package: models, forms, listing services,
session authentication, routes and the spreadsheet importers.

The Flask application itself is assembled by ``create_app`` in ``app.py``.
"""
