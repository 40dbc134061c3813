"""Translation catalog maintenance tools: scanner, statistics, unused keys and validator."""

__version__ = '0.1.0'
