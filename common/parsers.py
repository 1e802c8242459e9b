"""
common.parsers
~~~~~~~~~~~~~~
Extra DRF parsers.
"""
from rest_framework.parsers import JSONParser


class JSONPatchParser(JSONParser):
    """Accept ``application/json-patch+json`` bodies (RFC 6902)."""

    media_type = "application/json-patch+json"
