"""ArchStats - ArchMC statistics report renderer."""

__version__ = "0.1.0"
