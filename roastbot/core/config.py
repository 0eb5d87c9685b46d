import os
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

def _ids(raw: str) -> list[int]:
    return [int(p.strip()) for p in raw.split(",") if p.strip().isdigit()]

class Settings(BaseModel):
    token: str = Field(default_factory=lambda: os.getenv("DISCORD_TOKEN",""))
    guild_id: int = int(os.getenv("GUILD_ID","0"))
    data_dir: str = os.getenv("DATA_DIR","./data")
    sync_scope: str = os.getenv("SYNC_SCOPE", "both")
    test_guild_ids: list[int] = Field(default_factory=lambda: _ids(os.getenv("TEST_GUILD_IDS","")))
    admin_ids: list[int] = Field(default_factory=lambda: _ids(os.getenv("ADMIN_IDS","")))

    # Jeu (montants en centimes)
    roast_cache_ttl_s: int = int(os.getenv("ROAST_CACHE_TTL_S", "300"))
    roast_cache_size: int = int(os.getenv("ROAST_CACHE_SIZE", "512"))
    shade_cost_cents: int = int(os.getenv("SHADE_COST_CENTS", "50"))
    pot_increment_cents: int = int(os.getenv("POT_INCREMENT_CENTS", "50"))
    daily_matches: int = int(os.getenv("DAILY_MATCHES", "3"))

settings = Settings()
