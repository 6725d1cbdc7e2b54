"""Core command/response engine: transport, framing, command channel and logging."""
