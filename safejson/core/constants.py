"""
Common constants and mappings used across the safejson library.
"""

REPLACEMENT_CHARACTER = "\ufffd"

# C0 controls allowed in interchange text (the XML character set).
ALLOWED_CONTROL_CHARACTERS = frozenset("\t\n\r")

# Escapes for the raw contents of a JSON string built from untrusted text.
# Besides the characters JSON requires escaping, the HTML-significant
# characters and the JavaScript line terminators are written as \u escapes
# so the result can sit inside a <script> block or an HTML attribute.
JSON_STRING_ESCAPES = {
    '"': "\\u0022",
    "\\": "\\\\",
    "&": "\\u0026",
    "'": "\\u0027",
    "<": "\\u003c",
    ">": "\\u003e",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

# Rewrites applied to canonical encoder output. These characters only occur
# inside string literals there, so rewriting them keeps the value tree intact.
SCRIPT_SAFE_ESCAPES = {
    "&": "\\u0026",
    "<": "\\u003c",
    ">": "\\u003e",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

# Separators for compact canonical output.
CANONICAL_SEPARATORS = (",", ":")

EMPTY_OBJECT_TEXT = "{}"
EMPTY_ARRAY_TEXT = "[]"
