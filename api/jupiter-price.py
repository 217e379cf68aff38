"""Jupiter price endpoint for Vercel serverless."""
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mattylol.sources import PriceRoute
from mattylol.vercel import make_handler

handler = make_handler(PriceRoute())
