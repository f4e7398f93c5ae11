"""Exceptions raised while loading and converting XML documents."""


class ConversionError(Exception):
    """Base class for fatal conversion failures."""


class XmlParseError(ConversionError):
    """The input is not well-formed XML."""


class MissingInputError(ConversionError):
    """The input file or URL could not be found."""
