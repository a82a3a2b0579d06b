import unifi_rest
import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath('..'))

project = 'unifi-rest'
copyright = f'{datetime.now().year}, unifi-rest contributors'
author = 'unifi-rest contributors'

release = unifi_rest.__version__

# -- General configuration ---------------------------------------------------
extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

autosummary_generate = True
autodoc_member_order = 'bysource'
autoclass_content = 'both'
autodoc_typehints = 'description'
autodoc_typehints_format = 'short'

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store', '_autosummary']


def skip_private_fields(app, what, name, obj, skip, options):
    # _extra_fields and _id are implementation detail on every model.
    if what == 'class' and name in ('_extra_fields', '_id'):
        return True
    return skip


def setup(app):
    app.connect('autodoc-skip-member', skip_private_fields)


templates_path = ['_templates']
html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']
html_title = f"{project} Documentation"

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'requests': ('https://requests.readthedocs.io/en/latest/', None),
}

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
napoleon_use_ivar = True
napoleon_use_param = True
napoleon_use_rtype = True
