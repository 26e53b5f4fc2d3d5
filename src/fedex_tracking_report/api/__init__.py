from .auth import Authenticator
from .tracker import MAX_BATCH_SIZE, BatchTracker, build_request_body, chunked

__all__ = [
    "Authenticator",
    "BatchTracker",
    "MAX_BATCH_SIZE",
    "build_request_body",
    "chunked",
]
