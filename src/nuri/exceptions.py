class NuriError(Exception):
    """ base class for nuri errors """


class UriSyntaxError(NuriError, ValueError):
    """ The components you supplied cannot be assembled into a URI
        that satisfies RFC 3986 and the rules of its scheme, therefore
        we will NOT create an object, it cannot exist.

        component names the part of the URI that was rejected, or
        'uri' when the failure concerns how the parts fit together. """

    def __init__(self, message: str, component: str | None = None) -> None:
        super().__init__(message)
        self.component: str | None = component
