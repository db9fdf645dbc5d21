#!/usr/bin/env python3
"""
Main entry point for the Product Scraper API.

Usage:
    python main.py

Requirements:
    1. pip install -e .
    2. Set environment variables (see .env.example)
"""

import sys

def main():
    """Main entry point for the application."""
    # Validate configuration before binding the socket
    try:
        from app.config import settings
        settings.validate()
    except ValueError as e:
        print(f"ERROR: {e}")
        print("Please check the .env.example file for the supported environment variables.")
        sys.exit(1)

    # Import and run the app
    try:
        import uvicorn
        from app.main import app

        print("Starting Product Scraper API...")
        print(f"API will be available at: http://{settings.ADDRESS}:{settings.port}/")

        uvicorn.run(
            app,
            host=settings.ADDRESS,
            port=settings.port,
            log_level=settings.log_level.lower()
        )
    except ImportError as e:
        print(f"ERROR: Missing dependencies. Please run: pip install -e .")
        print(f"Import error: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"ERROR: Failed to start application: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
