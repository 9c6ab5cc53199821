"""Endpoint and class-name tags understood by the Parse REST API."""

from __future__ import annotations

API_ENDPOINT = "https://api.parse.com"
API_VERSION = "1"

HEADER_APPLICATION_ID = "X-Parse-Application-Id"
HEADER_CLIENT_KEY = "X-Parse-REST-API-Key"

ENDPOINT_USERS = "users"
ENDPOINT_ROLES = "roles"

CLASS_NAME_USER = "_User"
CLASS_NAME_ROLE = "_Role"

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


__all__ = [
    "API_ENDPOINT",
    "API_VERSION",
    "CLASS_NAME_ROLE",
    "CLASS_NAME_USER",
    "DATE_FORMAT",
    "ENDPOINT_ROLES",
    "ENDPOINT_USERS",
    "HEADER_APPLICATION_ID",
    "HEADER_CLIENT_KEY",
]
