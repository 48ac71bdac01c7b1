"""Local asset access for the report header."""

from .asset_resolver import inline_local_asset, encode_data_uri

__all__ = [
    "inline_local_asset",
    "encode_data_uri",
]
