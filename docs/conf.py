import os
import sys

from spreadsheet_builder import _get_version

sys.path.insert(0, os.path.abspath("../"))  # noqa: PTH100

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.viewcode",
    "sphinx.ext.napoleon",
    "enum_tools.autoenum",
    "sphinx_copybutton",
]
# Standard Sphinx configuration
templates_path = ["_templates"]
exclude_patterns = ["build", "Thumbs.db", ".DS_Store"]
language = "en"
master_doc = "index"
project = "spreadsheet-builder"
release = _get_version()
copyright = "MIT license"  # noqa: A001

# sphinx.ext.napoleon configuration
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_include_special_with_doc = False
napoleon_use_admonition_for_notes = True

html_theme = "alabaster"
pygments_style = "pastie"

# sphinx_copybutton options
copybutton_prompt_text = ">>> "
copybutton_line_continuation_character = "\\"
