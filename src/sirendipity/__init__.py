"""sirendipity package exports."""

from ._version import __version__
from .client import (
    DEFAULT_HEADERS,
    ActionRequest,
    ConfigurationError,
    ProtocolError,
    RequestError,
    SirenClient,
    SirenClientError,
    filter_siren,
    filter_success,
)
from .config import create_client_from_env, load_env_config
from .encoding import (
    FORM_MEDIA_TYPE,
    JSON_MEDIA_TYPE,
    SIREN_MEDIA_TYPE,
    SubmitData,
    encode_json,
    encode_query,
    fields_to_data,
    merge_action_data,
)
from .entity import Action, Entity, Field, Link, SubEntity
from .logging import LogfmtFormatter
from .response import SirenResponse

__all__ = [
    "__version__",
    # Client
    "SirenClient",
    "ActionRequest",
    "DEFAULT_HEADERS",
    "filter_success",
    "filter_siren",
    # Exceptions
    "SirenClientError",
    "RequestError",
    "ProtocolError",
    "ConfigurationError",
    # Document model
    "Entity",
    "SubEntity",
    "Action",
    "Field",
    "Link",
    "SirenResponse",
    # Encoding
    "SIREN_MEDIA_TYPE",
    "JSON_MEDIA_TYPE",
    "FORM_MEDIA_TYPE",
    "SubmitData",
    "encode_query",
    "encode_json",
    "fields_to_data",
    "merge_action_data",
    # Config / logging
    "create_client_from_env",
    "load_env_config",
    "LogfmtFormatter",
]
