from appforger.config import Settings

OWNER_ID = "user-1"
OTHER_OWNER_ID = "user-2"


def make_settings(**overrides) -> Settings:
    """Settings isolated from the environment, with forging enabled."""
    values = {
        "database_url": "sqlite+aiosqlite:///:memory:",
        "github_token": "ghp_test",
        "github_owner": "acme",
        "vercel_token": None,
        "vercel_team_id": None,
        "openai_api_key": None,
        "commit_settle_seconds": 0,
    }
    values.update(overrides)
    return Settings(**values)
