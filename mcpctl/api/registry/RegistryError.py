"""Registry failures."""


class RegistryError(RuntimeError):
    """The registry could not be reached or answered with an error."""


class ServerNotFoundError(RegistryError):
    """The registry has no server with the requested qualified name."""

    def __init__(self, qualified_name: str):
        super().__init__(f"Server '{qualified_name}' not found in registry")
        self.qualified_name = qualified_name
