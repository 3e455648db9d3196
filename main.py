"""
GitHub Repo Analyzer API Server
Run the Flask REST API server for the GitHub Repo Analyzer.
Usage:
    python main.py
    python main.py --port 8000
    python main.py --debug
"""

import argparse
import sys
from Analyzer.Routes.RepoRoute import CreateApp
from Analyzer.Utility.config import load_config

config = load_config()
# ✅ Create the Flask app globally so Gunicorn can find it
app = CreateApp(config)

def main():
    """Parse arguments and start the API server."""
    parser = argparse.ArgumentParser(
        description="GitHub Repo Analyzer REST API Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
            Examples:
            python main.py                    # Start on port 5000 (or $PORT)
            python main.py --port 8000        # Start on port 8000
            python main.py --host 127.0.0.1   # Start on localhost only
            python main.py --debug            # Start in debug mode
        """
    )
    parser.add_argument(
        '--port',
        type=int,
        default=config.port,
        help='Port to run the server on (default: $PORT or 5000)'
    )
    parser.add_argument(
        '--host',
        default=config.host,
        help='Host to bind to (default: 0.0.0.0)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=config.debug,
        help='Run in debug mode'
    )

    args = parser.parse_args()

    print(f"\n{'='*60}")
    print("GitHub Repo Analyzer API Server")
    print(f"{'='*60}")
    print(f"Server starting on http://{args.host}:{args.port}")
    print(f"Debug mode: {args.debug}")
    print(f"GitHub token configured: {bool(config.github_token)}")
    print(f"\nEndpoints:")
    print(f"  GET  http://{args.host}:{args.port}/api/health-check")
    print(f"  GET  http://{args.host}:{args.port}/api/repo/info?url=<GitHub URL>")
    print(f"  GET  http://{args.host}:{args.port}/api/repo/languages?url=<GitHub URL>")
    print(f"  GET  http://{args.host}:{args.port}/api/repo/technologies?url=<GitHub URL>")
    print(f"  POST http://{args.host}:{args.port}/api/github")
    print(f"{'='*60}\n")

    try:
        app.run(
            host=args.host,
            port=args.port,
            debug=args.debug,
            use_reloader=args.debug
        )
    except KeyboardInterrupt:
        print("\n\nServer stopped by user")
        sys.exit(0)
    except Exception as e:
        print(f"\nError starting server: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
