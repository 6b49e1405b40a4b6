"""
Implements the installation of XML manifests shipped by packages.

See the documentation on :mod:`~importer.installer`, :mod:`~importer.parsers`
and :mod:`~importer.namespaces` for more information.
"""
