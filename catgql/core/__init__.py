from .common import AppBaseModel, transform
from .errors import CatalogError, ErrorInfo, ErrorKind, MalformedRequest, RouteNotFound, UnknownOperation
from .logger import setup_logger

__all__ = [
    "AppBaseModel",
    "transform",
    "CatalogError",
    "ErrorInfo",
    "ErrorKind",
    "MalformedRequest",
    "RouteNotFound",
    "UnknownOperation",
    "setup_logger",
]
