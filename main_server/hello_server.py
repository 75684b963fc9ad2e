from __future__ import annotations

"""
Entry point for uvicorn:

  python -m uvicorn hello_server:app --host 0.0.0.0 --port 8000 --log-level warning

This file stays tiny on purpose.
All real logic lives in hello_core/.
"""

from hello_core.app_factory import create_app

app = create_app()
