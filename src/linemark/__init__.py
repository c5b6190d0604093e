"""linemark - convert line-oriented markup to HTML fragments.

Each input line is classified by a literal prefix marker and rendered as one
HTML element:

=========  ==========================
Prefix     Element
=========  ==========================
``# ``     ``<h1>...</h1>``
``## ``    ``<h2>...</h2>``
``### ``   ``<h3>...</h3>``
``---``    ``<hr>...</hr>``
(other)    ``<p>...</p>``
=========  ==========================

Rules are tried in that order and the first match wins. Content is written
verbatim without HTML escaping, and there is no inline or multi-line markup.

Examples
--------
    >>> from linemark import convert
    >>> convert("# Hello")
    '<h1>Hello</h1>'
    >>> convert("# A\\nPlain\\n## B")
    '<h1>A</h1><p>Plain</p><h2>B</h2>'

Files can be converted with :func:`convert_file`::

    >>> from linemark import convert_file
    >>> html = convert_file("notes.txt", output="notes.html")  # doctest: +SKIP

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "linemark requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from linemark.api import convert_file  # noqa: E402
from linemark.chain import ClassificationChain, ClassificationRule  # noqa: E402
from linemark.constants import LineCategory  # noqa: E402
from linemark.converter import DocumentConverter, convert  # noqa: E402
from linemark.exceptions import LinemarkError  # noqa: E402
from linemark.tags import TagCatalog  # noqa: E402

__all__ = [
    "__version__",
    "convert",
    "convert_file",
    "ClassificationChain",
    "ClassificationRule",
    "DocumentConverter",
    "LineCategory",
    "LinemarkError",
    "TagCatalog",
]
