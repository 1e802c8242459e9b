"""
apps.villas.services package.
"""
from .villa_service import (  # noqa: F401
    create_villa,
    delete_villa,
    get_villa,
    list_villas,
    patch_villa,
    update_villa,
)
