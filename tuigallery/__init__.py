"""A gallery of small terminal user interface demos and the state behind them."""

__version__ = "0.1.0"