"""Launch the shoreline analytics FastAPI server."""

import os

import uvicorn


def main():
    host = os.getenv("SHORELINE_HOST", "0.0.0.0")
    port = int(os.getenv("SHORELINE_PORT", "8000"))
    uvicorn.run("shoreline_analytics.server:app", host=host, port=port, reload=True)


if __name__ == "__main__":
    main()
