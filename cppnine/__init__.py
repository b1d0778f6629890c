"""Small command-line tools: bitcoin price lookup, RPN calculator and merge sort timer."""

__version__ = "0.1.0"
__all__ = ["bitcoin_exchange", "rpn", "pmergeme"]