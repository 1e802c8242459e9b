"""
web.services package.
"""
from .base_service import BaseService  # noqa: F401
from .villa_service import VillaService, as_villa, as_villa_list  # noqa: F401
