"""Configuration errors raised while reading market definitions.

Both errors derive from :class:`ValueError` so callers validating exchange data
can keep catching ``ValueError`` as they always did.
"""


class MalformedConfigError(ValueError):
    """A market definition holds a value that cannot be interpreted.

    Raised for malformed ``HH:MM`` strings, broken session ordering, invalid
    holiday dates or weekday numbers, and unreadable catalog files.
    """


class InvalidTimezoneError(ValueError):
    """The IANA timezone identifier of a market is unknown or empty."""
