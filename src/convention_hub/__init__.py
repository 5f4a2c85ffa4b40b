"""Convention hub - conventions, editions and collaborator permissions."""

__version__ = "0.1.0"
