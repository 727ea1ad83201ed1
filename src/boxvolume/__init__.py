"""Box volume calculator: a small Qt application built on a model / view split."""
__version__ = "1.0.0"
