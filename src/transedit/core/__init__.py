"""transedit core Python library package.

Hosts the tree editing engine, file collection model and format codecs.
"""

from . import exceptions  # noqa: F401

__all__ = ["exceptions"]
