"""
Bulk spreadsheet importers for events, members and directory entries.

Entry points live in ``nouasseur_app.importer.cli`` (Flask CLI) and
``nouasseur_app.importer.service`` (programmatic).
"""
