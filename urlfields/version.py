__version__ = "1.0.0"
__url__ = "https://github.com/zannen/urlfields"
