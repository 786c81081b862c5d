"""Schema diffing and save-payload formatting for the content-type builder."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
