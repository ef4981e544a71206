import argparse
from pathlib import Path

import logfire
import uvicorn

from ui.core import daisy_app
from fafsa import config
from fafsa.config import BuildSettings
from app.export import export_site
from app.routes.pages import ar as page_routes


def create_app(build: BuildSettings | None = None):
    app, _ = daisy_app()
    app.state.build = build or config.BUILD
    page_routes.to_app(app)
    return app


app = create_app()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python -m app.main", description="FAFSA Application Assistant")
    parser.set_defaults(port=config.port(), host="0.0.0.0")
    sub = parser.add_subparsers(dest="command")

    serve_p = sub.add_parser("serve", help="Run the web server")
    serve_p.add_argument("--port", type=int, default=config.port())
    serve_p.add_argument("--host", default="0.0.0.0")

    export_p = sub.add_parser("export", help="Render every page to static HTML")
    export_p.add_argument("--out", type=Path, default=Path("out"))
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logfire.configure(send_to_logfire="if-token-present", service_name="fafsa-assistant")

    if args.command == "export":
        written = export_site(app, args.out, app.state.build)
        logfire.info("wrote {count} pages to {out}", count=len(written), out=str(args.out))
        return 0

    logfire.instrument_starlette(app)
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
