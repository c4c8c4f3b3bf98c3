"""Central constants for the goessner_json project."""

# Goessner's reference keys. Attribute keys get a prefix so they never clash
# with child element names; '#' keys are not legal XML names.
ATTRIBUTE_PREFIX = "@"
TEXT_KEY = "#text"
CDATA_KEY = "#cdata"
NAMESPACE_SEPARATOR = ":"

# Deep enough for any real document while staying well below the interpreter's
# recursion limit (one frame per nesting level).
MAX_DEPTH = 500

# Characters that make a text segment "whitespace only".
XML_WHITESPACE = " \t\n\r"

JSON_ENCODING = "utf-8"
