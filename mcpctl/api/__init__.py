"""mcpctl API layer: command functions returning StageResult."""
