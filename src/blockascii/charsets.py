# Both schemes run from the lowest luminance glyph to the highest
DEFAULT_SCHEME = " `'.:;-~\"<+*uoxaN&8$%#W@"

# Same glyphs with the low punctuation regrouped
ALTERNATE_SCHEME = " `'.-~\":;<+*uoxaN&8$%#W@"

SCHEMES = (DEFAULT_SCHEME, ALTERNATE_SCHEME)
