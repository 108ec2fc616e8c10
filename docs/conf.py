import os
import sys

# The repository root (parent of docs/) must be on sys.path so that
# `import src.stacks` resolves.
sys.path.insert(0, os.path.abspath(".."))

project = "crate-stacks"
author = "crate-stacks contributors"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

html_theme = "furo"
