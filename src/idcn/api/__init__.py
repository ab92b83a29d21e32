"""HTTP API for idcn."""

from idcn.api.routes import app

__all__ = ["app"]
