"""Building blocks of a small command shell: tokenizing, syntax checks, expansion, wildcards, PATH lookup and signals."""

__version__ = "0.1.0"