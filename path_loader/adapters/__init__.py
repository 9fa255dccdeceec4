from .loader_http import HttpLoader

__all__ = [
    "HttpLoader",
]
