"""Asset path transformer for fixing Cockpit CMS storage paths."""

import re
from typing import TypeVar

from .serialization import rewrite_json
from ..entities.protocols import AssetPathConfig

T = TypeVar("T")

_PATH_FIELD = re.compile(r'"path":"/')
_SRC_ATTRIBUTE = re.compile(r'src=\\"(/[^"]*?)storage', re.IGNORECASE)
_HREF_ATTRIBUTE = re.compile(r'href=\\"(/[^"]*?)storage', re.IGNORECASE)
_DUPLICATE_UPLOADS = re.compile(r"/storage/uploads(?:/storage/uploads)+/")


def rewrite_asset_paths(json_string: str, config: AssetPathConfig) -> str:
    """Prefix ``"path"`` values and storage ``src``/``href`` attributes.
    
    Works on the compact serialized form, where quotes inside string values
    appear escaped (``src=\\"...``).
    """
    base_url = config.base_url
    path_prefix = f'"path":"{config.tenant_url}/storage/uploads/'
    
    json_string = _PATH_FIELD.sub(lambda m: path_prefix, json_string)
    json_string = _SRC_ATTRIBUTE.sub(lambda m: f'src=\\"{base_url}{m.group(1)}storage', json_string)
    return _HREF_ATTRIBUTE.sub(lambda m: f'href=\\"{base_url}{m.group(1)}storage', json_string)


def collapse_duplicate_uploads(json_string: str) -> str:
    """Collapse repeated ``/storage/uploads/`` segments into one."""
    return _DUPLICATE_UPLOADS.sub("/storage/uploads/", json_string)


def transform_asset_paths(json_string: str, config: AssetPathConfig) -> str:
    """Rewrite asset paths in a JSON string, including duplicate cleanup."""
    return collapse_duplicate_uploads(rewrite_asset_paths(json_string, config))


class AssetPathTransformer:
    """Transformer that only fixes asset paths.
    
    Use this when page link resolution is not needed.
    """
    
    def __init__(self, config: AssetPathConfig):
        self.config = config
    
    def transform(self, value: T) -> T:
        return rewrite_json(
            value,
            lambda s: transform_asset_paths(s, self.config),
            "Failed to transform asset paths",
        )
