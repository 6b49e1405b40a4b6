"""
Boxes are positionable content blocks shown in one of a fixed set of page
slots.

Packages ship their boxes in an XML manifest which is reconciled into the
database by :class:`~boxes.import_handlers.BoxInstaller`. See
:mod:`importer.installer` for the installation lifecycle.
"""
