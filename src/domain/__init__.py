"""Domain layer - Pure versioning logic.

This layer contains value objects and protocols (ports). It has NO
dependencies on any framework or infrastructure - it is pure Python.

Structure:
- value_objects/: Media types, Accept ranges, deprecation metadata
- protocols/: Logger and metrics interfaces
"""
