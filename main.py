"""Bhumi Consultancy dev launcher. Starts the API server in watch mode."""

import argparse
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = int(os.getenv("BACKEND_PORT", "5000"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bhumi Consultancy dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Data storage directory (default: ./data)")
    parser.add_argument("--demo", action="store_true",
                        help="Clean and create demo services, programs, and certificates")
    parser.add_argument("--port", type=int, default=BACKEND_PORT,
                        help=f"API port (default: {BACKEND_PORT})")
    return parser


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)

    # Seed before the server starts so the reloader sees the demo data
    if args.demo or args.data_dir:
        from consultancy import storage
        data_dir = args.data_dir or Path("data")
        storage.init_storage(data_dir)
        if args.demo:
            from consultancy.demo import create_demo_data
            create_demo_data()

    # The reloader imports consultancy.app in a child process, which reads DATA_DIR
    if args.data_dir:
        os.environ["DATA_DIR"] = str(args.data_dir.resolve())

    print(f"Starting API on http://localhost:{args.port} ...")
    uvicorn.run("consultancy.app:app", host=HOST, port=args.port, reload=True)


if __name__ == "__main__":
    main()
