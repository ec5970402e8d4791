"""mcpctl - install and manage MCP servers for AI clients."""
