"""FASTA DNA, RNA and reverse-complement rendering, and a test-tree lister."""

__version__ = "0.1.0"