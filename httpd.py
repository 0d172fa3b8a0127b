import argparse
import logging

from fileserver.config import Config
from fileserver.server import HTTPServer


def main(argv=None):
    parser = argparse.ArgumentParser(description="A minimal HTTP/1.0 static file server")
    parser.add_argument("--host", "-H", type=str, default="127.0.0.1", help="host to listen on")
    parser.add_argument("--port", "-p", type=int, default=8000, help="port to listen on")
    parser.add_argument("--root", "-r", type=str, default=".", help="directory to serve")
    parser.add_argument("--debug", "-D", action="store_true", help="enable debug logging")

    args = parser.parse_args(argv)
    config = Config(host=args.host, port=args.port, root=args.root, debug=args.debug)

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    server = HTTPServer(config)
    try:
        server.run()
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Shutting down")
        server.stop()


if __name__ == "__main__":
    main()
