from .loaders import FileLoader, UrlLoader

__all__ = [
    "FileLoader",
    "UrlLoader",
]
