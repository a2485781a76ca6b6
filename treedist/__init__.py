"""Tree edit distance with the Selkow and Zhang-Shasha algorithms, tree generators and benchmarks."""

__version__ = "0.1.0"