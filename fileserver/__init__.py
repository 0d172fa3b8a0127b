__title__ = "fileserver"
__version__ = "0.1.0"
