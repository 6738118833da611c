class GlbException(Exception):
    """Base class for every error raised while reading a GLB file."""
