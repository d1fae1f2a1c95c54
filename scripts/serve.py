#!/usr/bin/env python3
"""Serve the RSS passthrough and episode API."""

import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn
from dotenv import load_dotenv

from spooky_feed.web.app import app


if __name__ == "__main__":
    load_dotenv()

    port = int(os.environ.get("PORT", 8000))

    print("\n" + "="*60)
    print("SPOOKY BITCH SHOW FEED")
    print("="*60)
    print(f"RSS feed:  http://localhost:{port}/rss.xml")
    print(f"Episodes:  http://localhost:{port}/api/episodes")
    print("Press Ctrl+C to stop")
    print("="*60 + "\n")

    uvicorn.run(app, host="0.0.0.0", port=port)
