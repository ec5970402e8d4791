def get_server_name(qualified_name: str) -> str:
    """Key for the mcpServers map: ``@owner/name`` becomes ``name``."""
    if qualified_name.startswith("@") and "/" in qualified_name:
        return qualified_name.split("/", 1)[1]
    return qualified_name
