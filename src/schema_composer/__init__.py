"""OpenAPI 3.1 schema composition toolkit."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
