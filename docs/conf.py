# docs/conf.py
# Sphinx configuration for isosurf documentation build
# Exists so the API reference is generated from the package docstrings
# RELEVANT FILES:docs/index.rst,pyproject.toml,python/isosurf/__init__.py
# Configuration file for the Sphinx documentation builder.

import sys
import os

# Add Python source to path for autodoc
sys.path.insert(0, os.path.abspath('../python'))

project = 'isosurf'
copyright = '2025, isosurf contributors'
author = 'isosurf contributors'

# The short X.Y version
version = '0.1.0'
# The full version, including alpha/beta/rc tags
release = '0.1.0'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
]

# Napoleon settings for Google-style docstrings
napoleon_google_docstring = True
napoleon_numpy_docstring = False

autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
    'undoc-members': True,
}

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
    'flask': ('https://flask.palletsprojects.com/en/stable/', None),
}

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

html_theme = 'alabaster'
html_title = 'isosurf Documentation'
