class CredentialsMissingError(Exception):
    def __init__(
        self,
        message="Authentication required. Set the PETSAVE_CLIENT_ID and PETSAVE_CLIENT_SECRET environment variables or pass client_id and client_secret explicitly.",
    ):
        self.message = message
        super().__init__(self.message)


class BodyEncodingError(Exception):
    """Raised by a request body when its payload cannot be serialized.

    This is the failure type the request pipeline expects from body
    encoding. Any other exception raised while encoding a body is reported as
    an ``UncaughtError``.
    """

    def __init__(self, message: str, payload_type: str | None = None) -> None:
        self.message = message
        self.payload_type = payload_type
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.payload_type:
            return f"{self.message} (payload type: {self.payload_type})"
        return self.message
