#!/usr/bin/env python3

"""Heuristic thresholds and metadata identifiers used by the checker.

The thresholds are fixed values tuned toward recall. Components take them as
constructor defaults so alternative tunings can be wired in code.
"""

# Names up to this length are judged by rule "short and all lowercase".
# Longer names are split into a root and a suffix of this length.
MAX_SHORT_NAME_LENGTH = 3

# Fraction of siblings that must share a lowercase root
SAME_NAME_FACTOR_THRESHOLD = 0.5

# Renaming percentage above which an assembly is obfuscated
OBFUSCATED_RENAMING_THRESHOLD = 0.4

# Renaming percentage above which a clean assembly is reported as lightly obfuscated
LIGHTLY_OBFUSCATED_RENAMING_THRESHOLD = 0.2

# Highest code point considered ASCII
MAX_ASCII_CODE_POINT = 127

# Reserved name of the type holding module-level code
MODULE_TYPE_NAME = "<Module>"

# Method name used by Babel-generated module initializers
MODULE_INITIALIZER_NAME = "@!"

# Assembly-level attribute Babel leaves on its output
BABEL_OBFUSCATOR_ATTRIBUTE = "BabelObfuscatorAttribute"
