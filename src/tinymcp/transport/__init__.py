from tinymcp.transport.stdio import run_stdio, serve

__all__ = ["run_stdio", "serve"]
