"""resvn: run one svn command against many repositories selected by pattern."""

__version__ = "0.1.0"
