# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets. Use .env (local, gitignored).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "LUNATASK_LOG_LEVEL": "Console logging level (default: INFO).",
    "LUNATASK_LOG_DIR": "Directory for lunatask.log (default: .local/lunatask).",
    # Lunatask API
    "LUNATASK_ACCESS_TOKEN": "Lunatask access token (required for any API call).",
    "LUNATASK_TOKEN": "Fallback name for the access token.",
    "LUNATASK_BASE_URL": "API base URL (default: https://api.lunatask.app/v1).",
    "LUNATASK_TIMEOUT_SECONDS": "Per-request timeout in seconds (default: 10; 0 disables).",
}
