"""Parse REST API Python SDK: configuration and data typing."""

from .config import ClientConfig, get_api_url, get_application_id, get_client_key, get_config, initialize
from .dates import encode_date, parse_date
from .exceptions import ParseError
from .factory import ObjectFactory, create_object
from .http import create_http_client
from .objects import ParseObject, ParseRole, ParseUser
from .validation import is_valid_type
from .values import NULL, ParseFile, ParseGeoPoint, ParseRelation

__all__ = [
    "NULL",
    "ClientConfig",
    "ObjectFactory",
    "ParseError",
    "ParseFile",
    "ParseGeoPoint",
    "ParseObject",
    "ParseRelation",
    "ParseRole",
    "ParseUser",
    "create_http_client",
    "create_object",
    "encode_date",
    "get_api_url",
    "get_application_id",
    "get_client_key",
    "get_config",
    "initialize",
    "is_valid_type",
    "parse_date",
]
