"""GitHub commit status endpoint for Vercel serverless."""
import sys
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mattylol.sources import GithubStatusRoute
from mattylol.vercel import make_handler

handler = make_handler(GithubStatusRoute())
