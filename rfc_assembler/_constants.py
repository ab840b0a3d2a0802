"""Common literal values used across rfc_assembler.

These constants keep default paths and scaffold markers centralized so the
loader, generator, and tests can import the same values without drifting.
Intended for internal use within the rfc_assembler package.

Examples
--------
>>> from rfc_assembler import _constants
>>> _constants.TOC_FRAGMENT_NAME
'Table of Contents'
>>> _constants.MARKDOWN_SUFFIX
'.md'
"""

TOC_FRAGMENT_NAME = "Table of Contents"
MARKDOWN_SUFFIX = ".md"
MAX_HEADING_LEVEL = 4
FRAGMENT_BODY_SLOT = "%%FRAGMENT_BODY%%"
