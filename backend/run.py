#!/usr/bin/env python3
"""
Entry point for running the Envelope Budget API server.

Usage:
    python run.py [--port PORT] [--host HOST] [--storage TYPE]
"""

import argparse
import os
import webbrowser
import qrcode
import uvicorn

from envelope.config import load_settings


def print_qr_code(url: str) -> None:
    """Print a QR code to the terminal."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=1,
        border=1,
    )
    qr.add_data(url)
    qr.make(fit=True)

    # Print QR code using ASCII
    qr.print_ascii(invert=True)


def main():
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Envelope Budget")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to run on")
    parser.add_argument("--host", default=settings.host, help="Host to bind to")
    parser.add_argument("--storage", default=settings.storage_type, help="Storage backend (memory)")
    parser.add_argument("--open-docs", action="store_true", help="Open the API docs in a browser")
    args = parser.parse_args()

    url = f"http://{args.host}:{args.port}"

    print("\n" + "=" * 50)
    print("  Envelope Budget")
    print("=" * 50)
    print(f"\n  URL: {url}")
    print(f"  Storage: {args.storage}\n")

    try:
        print_qr_code(url)
    except Exception:
        pass  # QR code is optional

    print("\n  Press Ctrl+C to stop the server\n")
    print("=" * 50 + "\n")

    if args.open_docs:
        webbrowser.open(f"{url}/docs")

    # The app reads the storage type from the environment at startup
    os.environ["ENVELOPE_STORAGE"] = args.storage

    uvicorn.run(
        "envelope.main:app",
        host=args.host,
        port=args.port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
