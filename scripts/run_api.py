"""
Serve the configurator API with uvicorn.

Host, port, reload and log level default to the CONFIGURATOR_* settings
and can be overridden on the command line.

Usage:
    python scripts/run_api.py [--host 0.0.0.0] [--port 8080] [--reload]
"""
import argparse
import sys
from pathlib import Path

import uvicorn

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from quote_configurator.config.settings import get_settings


def main(argv=None):
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run the Quote Configurator API")
    parser.add_argument('--host', default=settings.host)
    parser.add_argument('--port', type=int, default=settings.port)
    parser.add_argument('--reload', action='store_true', default=settings.reload)
    args = parser.parse_args(argv)

    print(f"Serving configurator API on http://{args.host}:{args.port} (data: {settings.data_dir})")
    uvicorn.run(
        'quote_configurator.api.main:app',
        host=args.host,
        port=args.port,
        reload=args.reload,
        reload_dirs=[str(src_path)] if args.reload else None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
