"""Common type definitions for the migrationgate library."""

# Type aliases for clarity and documentation
ResourceKind = str
ResourceName = str
ImageReference = str
