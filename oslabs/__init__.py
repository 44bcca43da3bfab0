"""Operating-systems exercises: a toy shell, threaded matrix multiplication and a train-boarding monitor."""

__version__ = "0.1.0"
__all__ = ["shell", "matrix", "caltrain"]