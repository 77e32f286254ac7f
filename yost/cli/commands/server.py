"""Run the YOST API server."""

import cyclopts
import uvicorn

app = cyclopts.App(name="server", help="Server commands")


@app.command
def run(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        reload: Restart on code changes (development only).
    """
    uvicorn.run(
        "yost.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )
