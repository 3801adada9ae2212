"""Precompiled regular expressions exposed as named accessors.

Import the accessors directly (``from regexcollection import url``) or look a
pattern up by name with :func:`get_pattern`.
"""

from .patterns import (
    PatternDefinition,
    PatternMatch,
    alpha_numeric_and_dash_underscore,
    city_state_postal,
    definitions,
    dns_hostname,
    double_occurrences_of_dash_underscore,
    get_definition,
    get_pattern,
    iter_line_matches,
    iter_matches,
    markdown_code_fence,
    names,
    spaces,
    spintax,
    uri_last_segment,
    url,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "PatternDefinition",
    "PatternMatch",
    "spaces",
    "alpha_numeric_and_dash_underscore",
    "double_occurrences_of_dash_underscore",
    "uri_last_segment",
    "url",
    "dns_hostname",
    "spintax",
    "city_state_postal",
    "markdown_code_fence",
    "names",
    "definitions",
    "get_definition",
    "get_pattern",
    "iter_matches",
    "iter_line_matches",
]
