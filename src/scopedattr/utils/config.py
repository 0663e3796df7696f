"""
Configuration constants for scoped attribute resolution
"""

import os

# Scope codes (classic page/request/session/application numbering)
PAGE_SCOPE_CODE = 1
REQUEST_SCOPE_CODE = 2
SESSION_SCOPE_CODE = 3
APPLICATION_SCOPE_CODE = 4

# Scope labels and descriptor descriptions
PAGE_SCOPE_LABEL = "page"
REQUEST_SCOPE_LABEL = "request"
SESSION_SCOPE_LABEL = "session"
APPLICATION_SCOPE_LABEL = "application"

PAGE_SCOPE_DESCRIPTION = "page scoped attribute"
REQUEST_SCOPE_DESCRIPTION = "request scope attribute"
SESSION_SCOPE_DESCRIPTION = "session scoped attribute"
APPLICATION_SCOPE_DESCRIPTION = "application scoped attribute"

# Descriptor attribute keys
DESCRIPTOR_TYPE_KEY = "type"
DESCRIPTOR_DESIGN_TIME_KEY = "resolvableAtDesignTime"

# Modules searched by simple name when resolving a class (builtins plays the
# role of an implicitly imported language package)
DEFAULT_IMPORT_PACKAGES = ("builtins",)

# Dotted name of the marker object the upstream parser uses to flag
# identifier nodes already classified as plain variable references
DEFAULT_HINT_KEY_NAME = "scopedattr.runtime.context.IDENTIFIER_HINT"
HINT_KEY_ENV_VAR = "SCOPEDATTR_HINT_KEY"

# Separator for dotted class and static member names
NAME_SEPARATOR = "."

# Prefix of names that static member reads refuse to access
PRIVATE_NAME_PREFIX = "_"


def hint_key_name():
    """Dotted hint marker name, honouring SCOPEDATTR_HINT_KEY. Empty string disables the probe."""
    return os.environ.get(HINT_KEY_ENV_VAR, DEFAULT_HINT_KEY_NAME)
