"""Build spreadsheet documents in memory: cells, styles, shared text and tables."""

import importlib.metadata

from spreadsheet_builder.cell import *  # noqa: F403
from spreadsheet_builder.constants import *  # noqa: F403
from spreadsheet_builder.document import *  # noqa: F403
from spreadsheet_builder.exceptions import *  # noqa: F403
from spreadsheet_builder.registry import *  # noqa: F403
from spreadsheet_builder.styles import *  # noqa: F403
from spreadsheet_builder.table_builder import *  # noqa: F403
from spreadsheet_builder.xrefs import *  # noqa: F403

__version__ = importlib.metadata.version("spreadsheet-builder")


def _get_version() -> str:
    return __version__
