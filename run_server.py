"""
API Server Runner
Run with: python run_server.py  (listens on 0.0.0.0:$PORT, default 5000)
"""

import logging
import sys
from pathlib import Path

import uvicorn

# Add project directory to path
sys.path.insert(0, str(Path(__file__).parent))

from app.config import LOG_LEVEL, PORT

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info(f"🚀 Starting API server on port {PORT}...")
    uvicorn.run("app.main:app", host="0.0.0.0", port=PORT, log_level=LOG_LEVEL.lower())
