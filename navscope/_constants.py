"""Common literal values used across navscope.

Placeholders and identifier templates live here so the analyzer, the importer
and the tests agree on the exact strings without drifting.

Examples
--------
>>> from navscope import _constants
>>> _constants.POSITIONAL_ID_TEMPLATE.format(index=3)
'slide-3'
>>> _constants.HEADING_ID_TEMPLATE.format(index=1)
'heading-1'
"""

POSITIONAL_ID_TEMPLATE = "slide-{index}"
HEADING_ID_TEMPLATE = "heading-{index}"
FALLBACK_SECTION_ID = "main-content"

DEFAULT_DOCUMENT_TITLE = "Imported document"
UNTITLED_DOCUMENT = "Untitled"
UNTITLED_SECTION = "Untitled section"
ENTRY_TEXT_TEMPLATE = "item {id}"

ELLIPSIS = "..."
TITLE_MAX_LENGTH = 50
FALLBACK_TITLE_CHARS = 40

HTML_SUFFIXES = (".html", ".htm")
