# Configuration file for the Sphinx documentation builder.
#
# https://www.sphinx-doc.org/en/master/usage/configuration.html

project = "slotvec"
copyright = "2023, slotvec developers"
author = "slotvec developers"

extensions = ["sphinx.ext.intersphinx", "sphinx.ext.autodoc"]

exclude_patterns = ["_build"]

# keep the documented order: construction, mutation, access, iteration
autodoc_member_order = "bysource"
autodoc_typehints = "description"

html_theme = "press"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
}
