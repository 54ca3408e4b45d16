"""Error taxonomy shared by the gateway, the view-models and the access gate."""


class RemoteError(Exception):
    """A call to the data gateway failed. No partial effect is left behind."""

    def __init__(self, message, table=None):
        super().__init__(message)
        self.message = message
        self.table = table


class RecordNotFound(RemoteError):
    """An update or delete addressed an id that does not exist."""


class AuthError(Exception):
    """The signed-in identity could not be loaded during route gating."""
