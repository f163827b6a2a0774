"""Production entry point for the HR candidate server.

Storage is chosen from `data/config/server_config.yml` and the
environment: set AZURE_STORAGE_CONNECTION_STRING to persist to Azure Blob
Storage, otherwise candidates are kept in the local JSON file.

    uvicorn hr:app --host 0.0.0.0 --port 8000
"""
import argparse
from typing import Iterable, Optional

from hr_lib.main import create_app, Config

app = create_app(Config())


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="HR candidate server")
    p.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    p.add_argument("--port", type=int, default=8000, help="Port to listen on")
    return p.parse_args(list(argv) if argv is not None else None)


if __name__ == "__main__":
    import uvicorn
    args = parse_args()
    uvicorn.run(app, host=args.host, port=args.port)
