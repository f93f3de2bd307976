import argparse
import os
from typing import List, Optional

import uvicorn


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Serve the jobpoll API.")
    parser.add_argument("--host", default=os.environ.get("JOBPOLL_HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.environ.get("JOBPOLL_PORT", "8000")))
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args(argv)

    uvicorn.run("jobpoll.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
