"""threadroast - roast a Threads account with an LLM."""

from threadroast.models.profile import ThreadsPost, ThreadsProfile, decode_profile
from threadroast.models.roast import RoastRequest, RoastResult, ErrorResponse
from threadroast.config import RoastConfig
from threadroast.core.orchestrator import Roaster
from threadroast.core.prompt import build_prompt

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "Roaster",
    "RoastConfig",
    # Models
    "ThreadsPost",
    "ThreadsProfile",
    "RoastRequest",
    "RoastResult",
    "ErrorResponse",
    # Helpers
    "decode_profile",
    "build_prompt",
    "__version__",
]
